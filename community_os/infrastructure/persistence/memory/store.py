"""
In-memory persistence for tests and local runs.

One InMemoryStore lives per DI container (APP scope). Repositories copy
entities on the way in and out, so handlers never mutate stored state
without calling update().
"""

import copy
from datetime import datetime, timezone
from typing import Callable, Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


class InMemoryStore:
    def __init__(self):
        self.communities: dict = {}
        self.users: dict = {}
        self.spaces: dict = {}
        self.channels: dict = {}
        self.posts: dict = {}
        self.post_drafts: dict = {}
        self.likes: dict = {}
        self.comments: dict = {}
        self.content_versions: dict = {}
        self.courses: dict = {}
        self.lessons: dict = {}
        self.course_progress: dict = {}
        self.certificates: dict = {}
        self.payment_tiers: dict = {}
        self.coupons: dict = {}
        self.subscriptions: dict = {}
        self.notifications: dict = {}

    def clear(self) -> None:
        for table in vars(self).values():
            table.clear()


class MemoryTable(Generic[T]):
    """Copy-on-read/write access to one store table keyed by entity id."""

    def __init__(self, rows: dict):
        self._rows = rows

    def insert(self, entity: T) -> T:
        self._rows[entity.id] = copy.deepcopy(entity)
        return copy.deepcopy(entity)

    def replace(self, entity: T) -> T:
        if entity.id not in self._rows:
            raise KeyError(f"Unknown id {entity.id}")
        return self.insert(entity)

    def get(self, entity_id: str) -> Optional[T]:
        row = self._rows.get(entity_id)
        return copy.deepcopy(row) if row is not None else None

    def remove(self, entity_id: str) -> None:
        self._rows.pop(entity_id, None)

    def where(self, predicate: Callable[[T], bool]) -> list[T]:
        return [copy.deepcopy(row) for row in self._rows.values() if predicate(row)]

    def first(self, predicate: Callable[[T], bool]) -> Optional[T]:
        for row in self._rows.values():
            if predicate(row):
                return copy.deepcopy(row)
        return None

    def count(self, predicate: Callable[[T], bool]) -> int:
        return sum(1 for row in self._rows.values() if predicate(row))

    def rows(self) -> Iterable[T]:
        """Live rows, for repositories that mutate in bulk."""
        return self._rows.values()


def live(entity) -> bool:
    return getattr(entity, "deleted_at", None) is None


def soft_delete(table: MemoryTable, entity_id: str) -> None:
    entity = table.get(entity_id)
    if entity is None:
        return
    if entity.deleted_at is None:
        entity.deleted_at = datetime.now(timezone.utc)
    table.replace(entity)
