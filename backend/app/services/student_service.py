"""
Service pour les élèves : traduit chaque opération en un seul appel à la base.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from app.database import RecordStore, contains, eq
from app.services.payload import pick_fields

STUDENTS_TABLE = "students"
STUDENT_FIELDS = ("student_name", "cohort", "courses", "status")


def _now_iso() -> str:
    """Instant courant en ISO-8601 UTC, précision milliseconde (ex. 2024-09-01T08:30:00.000Z)."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


async def list_students(
    store: RecordStore,
    course: Optional[str] = None,
    academic_year: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    Retourne les élèves, éventuellement filtrés.
    - course : l'élève suit ce cours (contenance dans `courses`)
    - academic_year : égalité stricte sur `cohort`
    Les deux filtres se combinent en ET. Une valeur vide équivaut à l'absence de filtre.
    """
    filters = []
    if course:
        filters.append(contains("courses", [course]))
    if academic_year:
        filters.append(eq("cohort", academic_year))
    return await store.select(STUDENTS_TABLE, filters)


async def get_student(store: RecordStore, student_id: str) -> Dict[str, Any]:
    """Retourne exactement un élève ; la base lève une erreur si 0 ou plusieurs lignes."""
    return await store.select(STUDENTS_TABLE, [eq("id", student_id)], single=True)


async def create_student(store: RecordStore, body: Any) -> None:
    """Crée un élève. date_joined et last_login reçoivent le même instant."""
    now = _now_iso()
    row = pick_fields(body, STUDENT_FIELDS)
    row["date_joined"] = now
    row["last_login"] = now
    await store.insert(STUDENTS_TABLE, [row], returning="minimal")


async def update_student(store: RecordStore, student_id: str, body: Any) -> Any:
    """
    Écrase les quatre champs modifiables de l'élève.
    Un champ absent du corps est écrit à null. Les dates ne sont jamais modifiées.
    """
    return await store.update(STUDENTS_TABLE, pick_fields(body, STUDENT_FIELDS), [eq("id", student_id)])


async def delete_student(store: RecordStore, student_id: str) -> Any:
    return await store.delete(STUDENTS_TABLE, [eq("id", student_id)])
