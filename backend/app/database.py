"""
Client de la base de données relationnelle hébergée.

La base expose une API REST de requêtes (PostgREST, ex. Supabase), interrogée
avec le client officiel `postgrest`. RecordStore se limite à traduire nos
filtres en appels du client et ses erreurs en StoreError.

Un seul RecordStore est créé au démarrage (lifespan) puis injecté dans les
routers via la dépendance `get_store`.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from fastapi import Request
from postgrest import AsyncPostgrestClient
from postgrest.constants import DEFAULT_POSTGREST_CLIENT_HEADERS
from postgrest.exceptions import APIError
from postgrest.types import ReturnMethod

from app.config import Settings
from app.exceptions import ConfigurationError, StoreError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Filter:
    """Prédicat de filtrage : `operator` est le nom de la méthode du client (eq, contains)."""
    column: str
    operator: str
    value: Any


def eq(column: str, value: Any) -> Filter:
    """Égalité stricte : column = value."""
    return Filter(column, "eq", value)


def contains(column: str, values: Iterable[str]) -> Filter:
    """Contenance : la colonne de type tableau contient toutes les valeurs."""
    return Filter(column, "contains", list(values))


class RecordStore:
    """
    Accès aux tables de la base hébergée.

    Chaque méthode exécute exactement une requête et retourne les données
    renvoyées par la base (liste de lignes, objet unique, ou None).
    Les erreurs de la base sont levées en StoreError ; les erreurs réseau
    remontent telles quelles.
    """

    def __init__(self, client: AsyncPostgrestClient):
        self.client = client

    async def select(
        self,
        table: str,
        filters: Iterable[Filter] = (),
        *,
        single: bool = False,
        limit: Optional[int] = None,
    ) -> Any:
        """
        Lecture. En mode `single`, la base refuse toute réponse qui ne contient
        pas exactement une ligne (erreur remontée en StoreError).
        """
        query = _apply(self.client.from_(table).select("*"), filters)
        if limit is not None:
            query = query.limit(limit)
        if single:
            query = query.single()
        return await _execute(query)

    async def insert(
        self,
        table: str,
        rows: List[Dict[str, Any]],
        *,
        returning: str = "representation",
    ) -> Any:
        """Insertion. `returning="minimal"` : la base ne renvoie pas les lignes créées."""
        query = self.client.from_(table).insert(rows, returning=ReturnMethod(returning))
        data = await _execute(query)
        if returning == "minimal":
            return None
        return data

    async def update(self, table: str, values: Dict[str, Any], filters: Iterable[Filter]) -> Any:
        """Écrase les colonnes fournies sur toutes les lignes filtrées."""
        return await _execute(_apply(self.client.from_(table).update(values), filters))

    async def delete(self, table: str, filters: Iterable[Filter]) -> Any:
        """Supprime les lignes filtrées. Aucune ligne touchée n'est pas une erreur."""
        return await _execute(_apply(self.client.from_(table).delete(), filters))

    async def aclose(self) -> None:
        await self.client.aclose()


def _apply(query, filters: Iterable[Filter]):
    for f in filters:
        query = getattr(query, f.operator)(f.column, f.value)
    return query


async def _execute(query) -> Any:
    try:
        response = await query.execute()
    except APIError as exc:
        raise StoreError(exc.message or str(exc)) from exc
    return response.data


def create_record_store(config: Settings) -> RecordStore:
    """Crée le client de la base. Échoue immédiatement si la configuration est absente."""
    if not config.STORE_URL or not config.STORE_KEY:
        raise ConfigurationError("Missing record store configuration in environment variables.")
    client = AsyncPostgrestClient(
        f"{config.STORE_URL.rstrip('/')}/rest/v1",
        headers={
            **DEFAULT_POSTGREST_CLIENT_HEADERS,
            "apikey": config.STORE_KEY,
            "Authorization": f"Bearer {config.STORE_KEY}",
        },
    )
    return RecordStore(client)


async def check_store_connection(store: RecordStore) -> bool:
    """
    Vérifie une fois que la base répond (lecture d'une ligne de `students`).
    Le résultat est uniquement journalisé, il ne bloque jamais le service.
    """
    try:
        await store.select("students", limit=1)
    except StoreError as exc:
        logger.error("Connexion à la base échouée : %s", exc)
        return False
    except Exception as exc:
        logger.error("Erreur lors de la vérification de la connexion à la base : %s", exc)
        return False
    logger.info("Connexion à la base réussie, la base est joignable.")
    return True


def get_store(request: Request) -> RecordStore:
    """Dépendance FastAPI : fournit le client partagé créé au démarrage."""
    return request.app.state.store
