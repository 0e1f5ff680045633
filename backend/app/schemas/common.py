"""
Schémas partagés entre les routers.
"""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Corps de toute réponse d'erreur."""
    error: str


ERROR_RESPONSES = {500: {"model": ErrorResponse, "description": "Erreur de la base ou de la requête"}}
