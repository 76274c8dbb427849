"""
Entity records shared by the repositories, services and controllers.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Optional


def normalize_id(value: Any) -> Optional[str]:
    """Ids are strings everywhere; legacy numeric ids compare by their text."""
    if value is None:
        return None
    return str(value)


def parse_flag(value: Any) -> bool:
    """Stored flags may be legacy strings such as "false" or "0"."""
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes"}
    return bool(value)


def _known_fields(cls, data: dict) -> dict:
    names = {f.name for f in fields(cls)}
    return {key: value for key, value in data.items() if key in names}


@dataclass
class UserRecord:
    id: str
    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    admin: bool = False
    created_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "UserRecord":
        values = _known_fields(cls, data)
        values["id"] = normalize_id(values.get("id"))
        values["admin"] = parse_flag(values.get("admin"))
        return cls(**values)

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass
class CaseRecord:
    id: str
    user_id: Optional[str] = None
    title: Optional[str] = None
    storage_path: Optional[str] = None
    feedback: Optional[str] = None
    score: Optional[float] = None
    raw: dict = field(default_factory=dict)
    time_stamps: dict = field(default_factory=dict)
    user_comment: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "CaseRecord":
        values = _known_fields(cls, data)
        values["id"] = normalize_id(values.get("id"))
        values["user_id"] = normalize_id(values.get("user_id"))
        if values.get("raw") is None:
            values["raw"] = {}
        if values.get("time_stamps") is None:
            values["time_stamps"] = {}
        return cls(**values)

    def as_dict(self) -> dict:
        return asdict(self)
