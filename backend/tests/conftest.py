"""
Configuration partagée pour tous les tests.
Override la dépendance get_store pour éviter toute connexion réelle à la base hébergée.
"""

import os

os.environ.setdefault("STORE_URL", "http://store.test")
os.environ.setdefault("STORE_KEY", "test-key")
os.environ.setdefault("STORE_CHECK_ON_STARTUP", "false")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.database import get_store  # noqa: E402
from app.exceptions import StoreError  # noqa: E402
from app.main import app  # noqa: E402


class FakeRecordStore:
    """
    Base en mémoire respectant le contrat de RecordStore :
    filtres eq / contains, mode single, identifiants générés par la base.
    `fail_with` force une erreur sur le prochain appel.
    """

    def __init__(self):
        self.tables = {"students": [], "courses": []}
        self.calls = []
        self.fail_with = None
        self.closed = False
        self._next_id = 1

    def seed(self, table, **row):
        row.setdefault("id", self._new_id())
        self.tables[table].append(row)
        return row

    def _new_id(self):
        new_id = self._next_id
        self._next_id += 1
        return new_id

    def _check_failure(self):
        if self.fail_with is not None:
            exc, self.fail_with = self.fail_with, None
            raise exc

    @staticmethod
    def _matches(row, filters):
        for f in filters:
            if f.operator == "eq" and str(row.get(f.column)) != str(f.value):
                return False
            if f.operator == "contains" and not set(f.value) <= set(row.get(f.column) or []):
                return False
        return True

    async def select(self, table, filters=(), *, single=False, limit=None):
        self.calls.append(("select", table, list(filters)))
        self._check_failure()
        rows = [dict(r) for r in self.tables[table] if self._matches(r, filters)]
        if limit is not None:
            rows = rows[:limit]
        if single:
            if len(rows) != 1:
                raise StoreError("JSON object requested, multiple (or no) rows returned")
            return rows[0]
        return rows

    async def insert(self, table, rows, *, returning="representation"):
        self.calls.append(("insert", table, rows))
        self._check_failure()
        created = []
        for row in rows:
            created.append(self.seed(table, **dict(row)))
        if returning == "minimal":
            return None
        return [dict(r) for r in created]

    async def update(self, table, values, filters):
        self.calls.append(("update", table, values, list(filters)))
        self._check_failure()
        touched = []
        for row in self.tables[table]:
            if self._matches(row, filters):
                row.update(values)
                touched.append(dict(row))
        return touched

    async def delete(self, table, filters):
        self.calls.append(("delete", table, list(filters)))
        self._check_failure()
        kept, removed = [], []
        for row in self.tables[table]:
            (removed if self._matches(row, filters) else kept).append(row)
        self.tables[table] = kept
        return removed

    async def aclose(self):
        self.closed = True


@pytest.fixture
def store():
    return FakeRecordStore()


@pytest.fixture
def client(store):
    """Client HTTP de test avec la base mockée."""
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
