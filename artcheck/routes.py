"""
HTTP routes for the artcheck API.
"""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Body, Depends

from artcheck.config import Settings
from artcheck.controllers import CaseController, UserController
from artcheck.dependencies import (
    get_app_settings,
    get_case_controller,
    get_user_controller,
)
from artcheck.schemas import StatusResponse, UserCreatePayload

status_router = APIRouter()
router = APIRouter()


@status_router.get("/status", response_model=StatusResponse)
def status(settings: Settings = Depends(get_app_settings)):
    return StatusResponse(
        status=200,
        timeStatus=datetime.now(timezone.utc).isoformat(),
        message=settings.status_message,
    )


@router.get("/users")
def list_users(controller: UserController = Depends(get_user_controller)):
    return controller.list_users()


@router.get("/users/{user_id}")
def get_user(
    user_id: str, controller: UserController = Depends(get_user_controller)
):
    return controller.get_user(user_id)


@router.post("/users")
def create_user(
    payload: UserCreatePayload,
    controller: UserController = Depends(get_user_controller),
):
    return controller.create_user(payload.user.model_dump())


@router.put("/users/{user_id}")
def update_user(
    user_id: str,
    payload: dict | None = Body(default=None),
    controller: UserController = Depends(get_user_controller),
):
    return controller.update_user(user_id, payload or {})


@router.delete("/users/{user_id}")
def delete_user(
    user_id: str, controller: UserController = Depends(get_user_controller)
):
    return controller.delete_user(user_id)


@router.get("/cases")
def list_cases(controller: CaseController = Depends(get_case_controller)):
    return controller.list_cases()


@router.get("/cases/{case_id}")
def get_case(
    case_id: str, controller: CaseController = Depends(get_case_controller)
):
    return controller.get_case(case_id)


@router.post("/cases")
def create_case(
    payload: dict | None = Body(default=None),
    controller: CaseController = Depends(get_case_controller),
):
    return controller.create_case(payload or {})


@router.put("/cases/{case_id}")
def update_case(
    case_id: str,
    payload: dict | None = Body(default=None),
    controller: CaseController = Depends(get_case_controller),
):
    return controller.update_case(case_id, payload or {})


@router.delete("/cases/{case_id}")
def delete_case(
    case_id: str, controller: CaseController = Depends(get_case_controller)
):
    return controller.delete_case(case_id)
