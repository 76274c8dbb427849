"""
Pydantic schemas for the artcheck API.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class UserInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    admin: bool = Field(
        default=False, validation_alias=AliasChoices("admin", "isAdmin")
    )
    created_at: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("created_at", "createdAt")
    )


class UserCreatePayload(BaseModel):
    user: UserInput


class Envelope(BaseModel):
    ok: bool
    message: str
    payload: Any = None


class ErrorEnvelope(Envelope):
    error: Optional[str] = None


class StatusResponse(BaseModel):
    status: int
    timeStatus: str
    message: str
