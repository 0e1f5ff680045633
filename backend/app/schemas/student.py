"""
Schémas Pydantic pour les élèves.

Les corps de requête ne sont pas typés : voir app.services.payload.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict


class StudentResponse(BaseModel):
    """Ligne `students` telle que renvoyée par la base (valeurs et colonnes en plus transmises telles quelles)."""
    id: Any = None
    student_name: Any = None
    cohort: Any = None
    courses: Any = None
    date_joined: Any = None
    last_login: Any = None
    status: Any = None

    model_config = ConfigDict(extra="allow")


class StudentMutationResponse(BaseModel):
    """Réponse de PUT/DELETE : message de confirmation + écho des lignes touchées."""
    message: str
    data: Optional[List[StudentResponse]] = None
