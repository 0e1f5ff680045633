"""
Erreurs de l'API et conversion en réponses JSON.

Deux familles seulement :
- ConfigurationError : configuration manquante, fatale au démarrage ;
- toute autre erreur pendant une requête : réponse 500 avec le message brut.
"""

from fastapi.responses import JSONResponse


class ConfigurationError(RuntimeError):
    """Variables d'environnement obligatoires absentes."""


class StoreError(Exception):
    """Erreur renvoyée par la base hébergée ; str(exc) est le message de la base."""


def error_response(exc: Exception, status_code: int = 500) -> JSONResponse:
    """Réponse d'erreur uniforme : {"error": message}."""
    return JSONResponse(status_code=status_code, content={"error": str(exc)})
