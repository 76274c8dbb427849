"""
Storage abstraction for the flat-file JSON store and in-memory testing.

The relational implementation lives in `artcheck.db`.
"""

from __future__ import annotations

import copy
import json
import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when a backend cannot read or write its records."""


class StorageBackend(Protocol):
    """Defines the operations the repositories need from persistence."""

    def read_all(self) -> Optional[list[dict]]:
        ...

    def find_by_id(self, record_id: str) -> Optional[dict]:
        ...

    def insert(self, record: dict) -> dict:
        ...

    def delete_by_id(self, record_id: str) -> Optional[dict]:
        ...


def _matches(record: dict, record_id: str) -> bool:
    value = record.get("id")
    return value is not None and str(value) == str(record_id)


@dataclass
class InMemoryStorage:
    """Test double for storage interactions."""

    records: list[dict] = field(default_factory=list)

    def read_all(self) -> list[dict]:
        return copy.deepcopy(self.records)

    def find_by_id(self, record_id: str) -> Optional[dict]:
        for record in self.records:
            if _matches(record, record_id):
                return copy.deepcopy(record)
        return None

    def insert(self, record: dict) -> dict:
        # Round-trip through JSON to mimic what a real backend persists
        stored = json.loads(json.dumps(record, default=str))
        self.records.append(stored)
        return copy.deepcopy(stored)

    def delete_by_id(self, record_id: str) -> Optional[dict]:
        for index, record in enumerate(self.records):
            if _matches(record, record_id):
                return self.records.pop(index)
        return None

    def reset(self) -> None:
        """Clear all stored data (useful in tests)."""
        self.records.clear()


class JsonFileStorage:
    """
    Keeps one collection as a JSON array in a single file.

    Every mutation reads the whole array and writes it back. Mutations are
    serialised per instance; separate processes sharing the file can still
    lose updates.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def read_all(self) -> list[dict]:
        if not self.path.exists():
            return []
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"Cannot read {self.path}: {exc}") from exc
        if not text.strip():
            return []
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise StorageError(f"Corrupt JSON in {self.path}: {exc}") from exc
        if not isinstance(data, list):
            raise StorageError(f"Expected a JSON array in {self.path}")
        if not all(isinstance(record, dict) for record in data):
            raise StorageError(f"Expected JSON objects in {self.path}")
        return data

    def write_all(self, records: list[dict]) -> None:
        temp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(temp, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, ensure_ascii=False, default=str)
            temp.replace(self.path)
        except OSError as exc:
            raise StorageError(f"Cannot write {self.path}: {exc}") from exc

    def find_by_id(self, record_id: str) -> Optional[dict]:
        for record in self.read_all():
            if _matches(record, record_id):
                return record
        return None

    def insert(self, record: dict) -> dict:
        with self._lock:
            records = self.read_all()
            records.append(record)
            self.write_all(records)
        return record

    def delete_by_id(self, record_id: str) -> Optional[dict]:
        with self._lock:
            records = self.read_all()
            removed = None
            remaining = []
            for record in records:
                if removed is None and _matches(record, record_id):
                    removed = record
                else:
                    remaining.append(record)
            if removed is None:
                return None
            self.write_all(remaining)
        logger.debug("Removed record %s from %s", record_id, self.path)
        return removed
