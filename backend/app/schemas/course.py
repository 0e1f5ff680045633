"""
Schémas Pydantic pour les cours.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict


class CourseResponse(BaseModel):
    id: Any = None
    name: Any = None

    model_config = ConfigDict(extra="allow")


class CourseMutationResponse(BaseModel):
    message: str
    data: Optional[List[CourseResponse]] = None
