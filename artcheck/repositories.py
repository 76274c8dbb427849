"""
Entity repositories on top of a chosen storage backend.
"""

from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

from artcheck.models import CaseRecord, UserRecord, normalize_id
from artcheck.storage import StorageBackend

T = TypeVar("T", UserRecord, CaseRecord)


class EntityRepository(Generic[T]):
    """Translates generic storage rows into entity records."""

    def __init__(self, storage: StorageBackend, factory: Callable[[dict], T]):
        self.storage = storage
        self._factory = factory

    def get_all(self) -> Optional[list[T]]:
        rows = self.storage.read_all()
        if rows is None:
            return None
        return [self._factory(row) for row in rows]

    def get_by_id(self, record_id) -> Optional[T]:
        row = self.storage.find_by_id(normalize_id(record_id))
        return self._factory(row) if row else None

    def create_one(self, record: T) -> T:
        return self._factory(self.storage.insert(record.as_dict()))

    def delete_by_id(self, record_id) -> Optional[T]:
        row = self.storage.delete_by_id(normalize_id(record_id))
        return self._factory(row) if row else None


class UserRepository(EntityRepository[UserRecord]):
    def __init__(self, storage: StorageBackend):
        super().__init__(storage, UserRecord.from_dict)


class CaseRepository(EntityRepository[CaseRecord]):
    def __init__(self, storage: StorageBackend):
        super().__init__(storage, CaseRecord.from_dict)
