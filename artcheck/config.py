"""
Configuration and settings for the artcheck API.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings for the FastAPI service."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    api_prefix: str = Field(default="/api")

    # Listening address for `artcheck.app.main`.
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=3005)

    log_level: str = Field(default="INFO")
    status_message: str = Field(
        default="Proyecto Nestlé - Validación de Artes con IA"
    )

    # Which persistence layer backs the users/cases repositories.
    storage_backend: Literal["file", "database"] = Field(default="file")

    # Flat-file JSON store
    data_dir: str = Field(default="data")
    users_file: str = Field(default="users.json")
    cases_file: str = Field(default="cases.json")

    # Relational store (any SQLAlchemy URL, Postgres expected)
    database_url: Optional[str] = Field(default=None)

    @property
    def users_path(self) -> Path:
        return Path(self.data_dir) / self.users_file

    @property
    def cases_path(self) -> Path:
        return Path(self.data_dir) / self.cases_file


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
