"""
Business logic for users and cases.

Lookups and deletions return ``None`` for unknown ids instead of raising;
storage failures propagate as ``StorageError``.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from artcheck.models import CaseRecord, UserRecord
from artcheck.repositories import CaseRepository, UserRepository

logger = logging.getLogger(__name__)


def new_id() -> str:
    """Return a fresh 128-bit random identifier."""
    return uuid.uuid4().hex


class UserService:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    def list_users(self) -> Optional[list[UserRecord]]:
        return self.repository.get_all()

    def get_user(self, user_id: str) -> Optional[UserRecord]:
        return self.repository.get_by_id(user_id)

    def create_user(self, data: dict) -> UserRecord:
        """
        Store a new user under a generated id.

        Any ``id`` in ``data`` is ignored. ``created_at`` defaults to now (UTC).
        """
        values = {**(data or {}), "id": new_id()}
        if not values.get("created_at"):
            values["created_at"] = datetime.now(timezone.utc).isoformat()
        user = UserRecord.from_dict(values)
        created = self.repository.create_one(user)
        logger.info("Created user %s", created.id)
        return created

    def delete_user(self, user_id: str) -> Optional[UserRecord]:
        removed = self.repository.delete_by_id(user_id)
        if not removed:
            return None
        logger.info("Deleted user %s", removed.id)
        return removed

    def update_user(self, user_id: str, data: dict) -> UserRecord:
        raise NotImplementedError("Updating users is not supported")


class CaseService:
    def __init__(self, repository: CaseRepository):
        self.repository = repository

    def list_cases(self) -> Optional[list[CaseRecord]]:
        return self.repository.get_all()

    def get_case(self, case_id: str) -> Optional[CaseRecord]:
        return self.repository.get_by_id(case_id)

    def create_case(self, data: dict) -> CaseRecord:
        raise NotImplementedError("Creating cases is not supported")

    def update_case(self, case_id: str, data: dict) -> CaseRecord:
        raise NotImplementedError("Updating cases is not supported")

    def delete_case(self, case_id: str) -> Optional[CaseRecord]:
        raise NotImplementedError("Deleting cases is not supported")
