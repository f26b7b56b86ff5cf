"""
In-memory storage backend.

Tables are plain dicts keyed by primary key. A single asyncio.Lock serializes
units of work; every write goes through a StoreTransaction that journals the
previous value so an uncommitted unit of work can be undone.
"""

import asyncio
from typing import Dict, Iterator, List, Optional, Tuple, TypeVar

from src.domain.base import BaseModel

M = TypeVar("M", bound=BaseModel)

TABLES = (
    "users",
    "sessions",
    "api_keys",
    "classes",
    "students",
    "enrollments",
    "attendance",
)

_MISSING = object()


class InMemoryStore:
    def __init__(self):
        self.tables: Dict[str, Dict[str, BaseModel]] = {name: {} for name in TABLES}
        self.lock = asyncio.Lock()

    def count(self, table: str) -> int:
        return len(self.tables[table])


class StoreTransaction:
    """
    Journaled view of an InMemoryStore.

    Reads and writes copy entities, so callers never hold a reference into a
    table and every change has to come back through put().
    """

    def __init__(self, store: InMemoryStore):
        self.store = store
        self._journal: List[Tuple[str, str, object]] = []

    def get(self, table: str, key: str) -> Optional[M]:
        entity = self.store.tables[table].get(key)
        return entity.model_copy(deep=True) if entity is not None else None

    def values(self, table: str) -> Iterator[M]:
        for entity in list(self.store.tables[table].values()):
            yield entity.model_copy(deep=True)

    def keys(self, table: str) -> List[str]:
        return list(self.store.tables[table].keys())

    def put(self, table: str, key: str, entity: M) -> M:
        rows = self.store.tables[table]
        self._journal.append((table, key, rows.get(key, _MISSING)))
        rows[key] = entity.model_copy(deep=True)
        return entity

    def delete(self, table: str, key: str) -> bool:
        rows = self.store.tables[table]
        if key not in rows:
            return False
        self._journal.append((table, key, rows.pop(key)))
        return True

    def commit(self):
        self._journal.clear()

    def rollback(self):
        while self._journal:
            table, key, previous = self._journal.pop()
            rows = self.store.tables[table]
            if previous is _MISSING:
                rows.pop(key, None)
            else:
                rows[key] = previous
