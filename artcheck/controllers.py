"""
Controllers turning service outcomes into JSON response envelopes.

Every response carries ``ok``, ``message`` and ``payload``. Found records
answer 200; unknown ids answer 404 with a null payload.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi.responses import JSONResponse

from artcheck.schemas import Envelope, ErrorEnvelope
from artcheck.services import CaseService, UserService

logger = logging.getLogger(__name__)


def success(message: str, payload: Any) -> JSONResponse:
    body = Envelope(ok=True, message=message, payload=payload)
    return JSONResponse(status_code=200, content=body.model_dump())


def failure(
    message: str, status_code: int = 404, error: Optional[str] = None
) -> JSONResponse:
    if error is None:
        body = Envelope(ok=False, message=message, payload=None).model_dump()
    else:
        body = ErrorEnvelope(
            ok=False, message=message, payload=None, error=error
        ).model_dump()
    return JSONResponse(status_code=status_code, content=body)


def not_implemented(operation: str) -> JSONResponse:
    return failure(f"{operation} is not implemented", status_code=501)


class UserController:
    def __init__(self, service: UserService):
        self.service = service

    def list_users(self) -> JSONResponse:
        users = self.service.list_users()
        if users is None:
            return failure("No users available")
        return success("Success", [user.as_dict() for user in users])

    def get_user(self, user_id: str) -> JSONResponse:
        user = self.service.get_user(user_id)
        if not user:
            return failure("User not found")
        return success("Success", user.as_dict())

    def create_user(self, data: dict) -> JSONResponse:
        try:
            user = self.service.create_user(data)
        except Exception as exc:
            # 404 matches the original contract for failed creations.
            logger.exception("User creation failed")
            return failure("Could not create user", error=str(exc))
        return success("User created", user.as_dict())

    def update_user(self, user_id: str, data: dict) -> JSONResponse:
        try:
            user = self.service.update_user(user_id, data)
        except NotImplementedError:
            return not_implemented("Updating users")
        return success("User updated", user.as_dict())

    def delete_user(self, user_id: str) -> JSONResponse:
        user = self.service.delete_user(user_id)
        if not user:
            return failure("Could not delete user")
        return success(f"Deleted user {user.id}", user.as_dict())


class CaseController:
    def __init__(self, service: CaseService):
        self.service = service

    def list_cases(self) -> JSONResponse:
        cases = self.service.list_cases()
        if cases is None:
            return failure("No cases available")
        return success("Success", [case.as_dict() for case in cases])

    def get_case(self, case_id: str) -> JSONResponse:
        case = self.service.get_case(case_id)
        if not case:
            return failure("Case not found")
        return success("Success", case.as_dict())

    def create_case(self, data: dict) -> JSONResponse:
        try:
            case = self.service.create_case(data)
        except NotImplementedError:
            return not_implemented("Creating cases")
        return success("Case created", case.as_dict())

    def update_case(self, case_id: str, data: dict) -> JSONResponse:
        try:
            case = self.service.update_case(case_id, data)
        except NotImplementedError:
            return not_implemented("Updating cases")
        return success("Case updated", case.as_dict())

    def delete_case(self, case_id: str) -> JSONResponse:
        try:
            case = self.service.delete_case(case_id)
        except NotImplementedError:
            return not_implemented("Deleting cases")
        if not case:
            return failure("Could not delete case")
        return success(f"Deleted case {case.id}", case.as_dict())
