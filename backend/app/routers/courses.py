"""
Router pour les cours. Pas de route de mise à jour.
"""

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends

from app.database import RecordStore, get_store
from app.exceptions import error_response
from app.schemas.common import ERROR_RESPONSES
from app.schemas.course import CourseMutationResponse, CourseResponse
from app.services import course_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courses", tags=["Courses"], responses=ERROR_RESPONSES)


@router.get("", response_model=List[CourseResponse], summary="Lister les cours")
async def list_courses(store: RecordStore = Depends(get_store)):
    try:
        return await course_service.list_courses(store)
    except Exception as exc:
        logger.error("Error fetching courses: %s", exc)
        return error_response(exc)


@router.post("", response_model=Optional[List[CourseResponse]], status_code=201, summary="Créer un cours")
async def create_course(body: Any = Body(default=None), store: RecordStore = Depends(get_store)):
    """Contrairement aux élèves, renvoie directement les lignes créées."""
    try:
        return await course_service.create_course(store, body)
    except Exception as exc:
        logger.error("Error creating course: %s", exc)
        return error_response(exc)


@router.delete("/{course_id}", response_model=CourseMutationResponse, summary="Supprimer un cours")
async def delete_course(course_id: str, store: RecordStore = Depends(get_store)):
    try:
        rows = await course_service.delete_course(store, course_id)
    except Exception as exc:
        logger.error("Error deleting course %s: %s", course_id, exc)
        return error_response(exc)
    return {"message": "Course deleted successfully.", "data": rows}
