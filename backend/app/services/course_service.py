"""
Service pour les cours (pas de mise à jour : création et suppression uniquement).
"""

from typing import Any, Dict, List

from app.database import RecordStore, eq
from app.services.payload import pick_fields

COURSES_TABLE = "courses"


async def list_courses(store: RecordStore) -> List[Dict[str, Any]]:
    return await store.select(COURSES_TABLE)


async def create_course(store: RecordStore, body: Any) -> Any:
    """Insère un cours et retourne les lignes créées telles que renvoyées par la base."""
    return await store.insert(COURSES_TABLE, [pick_fields(body, ("name",))])


async def delete_course(store: RecordStore, course_id: str) -> Any:
    return await store.delete(COURSES_TABLE, [eq("id", course_id)])
