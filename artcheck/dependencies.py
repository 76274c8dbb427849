"""
Dependency wiring for the FastAPI app.

Backends are built once by `create_app` and kept on ``app.state``; route
dependencies read them from the request's app, so nothing lives in module
globals.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from artcheck.config import Settings
from artcheck.controllers import CaseController, UserController
from artcheck.db import SqlTableStorage, build_engine
from artcheck.repositories import CaseRepository, UserRepository
from artcheck.services import CaseService, UserService
from artcheck.storage import JsonFileStorage, StorageBackend

logger = logging.getLogger(__name__)


@dataclass
class Backends:
    users: StorageBackend
    cases: StorageBackend


@dataclass
class Container:
    user_service: UserService
    case_service: CaseService


def build_backends(settings: Settings) -> Backends:
    """Construct the storage backends selected by ``settings.storage_backend``."""
    if settings.storage_backend == "database":
        engine = build_engine(settings.database_url or "")
        logger.info("Using database storage at %s", engine.url.render_as_string())
        return Backends(
            users=SqlTableStorage(engine, "users"),
            cases=SqlTableStorage(engine, "cases"),
        )
    logger.info("Using JSON file storage in %s", settings.data_dir)
    return Backends(
        users=JsonFileStorage(settings.users_path),
        cases=JsonFileStorage(settings.cases_path),
    )


def build_container(
    settings: Settings, backends: Optional[Backends] = None
) -> Container:
    backends = backends or build_backends(settings)
    return Container(
        user_service=UserService(UserRepository(backends.users)),
        case_service=CaseService(CaseRepository(backends.cases)),
    )


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_user_controller(request: Request) -> UserController:
    return UserController(get_container(request).user_service)


def get_case_controller(request: Request) -> CaseController:
    return CaseController(get_container(request).case_service)
