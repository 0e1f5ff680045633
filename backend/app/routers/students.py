"""
Router pour les élèves.
GET    /students          : liste (filtres course, academic_year)
GET    /students/{id}     : détail
POST   /students          : création
PUT    /students/{id}     : mise à jour (écrase les quatre champs)
DELETE /students/{id}     : suppression

Toute erreur de la base est renvoyée en 500 {"error": message}.
"""

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends

from app.database import RecordStore, get_store
from app.exceptions import error_response
from app.schemas.common import ERROR_RESPONSES, MessageResponse
from app.schemas.student import StudentMutationResponse, StudentResponse
from app.services import student_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/students", tags=["Students"], responses=ERROR_RESPONSES)


@router.get("", response_model=List[StudentResponse], summary="Lister les élèves")
async def list_students(
    course: Optional[str] = None,
    academic_year: Optional[str] = None,
    store: RecordStore = Depends(get_store),
):
    """Retourne tous les élèves, filtrés par cours suivi et/ou par cohorte."""
    try:
        return await student_service.list_students(store, course, academic_year)
    except Exception as exc:
        logger.error("Error fetching students: %s", exc)
        return error_response(exc)


@router.get("/{student_id}", response_model=StudentResponse, summary="Détail d'un élève")
async def get_student(student_id: str, store: RecordStore = Depends(get_store)):
    """Pas de 404 : un identifiant inconnu est une erreur de la base (500)."""
    try:
        return await student_service.get_student(store, student_id)
    except Exception as exc:
        logger.error("Error fetching student %s: %s", student_id, exc)
        return error_response(exc)


@router.post("", response_model=MessageResponse, status_code=201, summary="Créer un élève")
async def create_student(body: Any = Body(default=None), store: RecordStore = Depends(get_store)):
    try:
        await student_service.create_student(store, body)
    except Exception as exc:
        logger.error("Error creating student: %s", exc)
        return error_response(exc)
    return {"message": "Student details successfully created."}


@router.put("/{student_id}", response_model=StudentMutationResponse, summary="Modifier un élève")
async def update_student(student_id: str, body: Any = Body(default=None), store: RecordStore = Depends(get_store)):
    """Les champs absents du corps sont écrits à null."""
    try:
        rows = await student_service.update_student(store, student_id, body)
    except Exception as exc:
        logger.error("Error updating student %s: %s", student_id, exc)
        return error_response(exc)
    return {"message": "Student details successfully updated.", "data": rows}


@router.delete("/{student_id}", response_model=StudentMutationResponse, summary="Supprimer un élève")
async def delete_student(student_id: str, store: RecordStore = Depends(get_store)):
    try:
        rows = await student_service.delete_student(store, student_id)
    except Exception as exc:
        logger.error("Error deleting student %s: %s", student_id, exc)
        return error_response(exc)
    return {"message": "Student deleted successfully.", "data": rows}
