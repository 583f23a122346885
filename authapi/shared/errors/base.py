# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast

INTERNAL_ERROR_MESSAGE = "Internal server error"


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    message: str
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "message": self.message,
            "code": self.code,
            "success": False,
            "error": True,
        }
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    """Base for errors raised by the auth use cases.

    Subclasses declare ``code``, ``status`` and ``message`` as class
    attributes; any of them can be overridden per instance.
    """

    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_code = code or cast(str, getattr(self, "code", "domain_error"))
        resolved_status = status or cast(
            HTTPStatus, getattr(self, "status", HTTPStatus.BAD_REQUEST)
        )
        resolved_message = message or cast(
            str, getattr(self, "message", "Request could not be processed")
        )
        super().__init__(
            code=resolved_code,
            status=resolved_status,
            message=resolved_message,
            context=context,
        )


class ValidationError(DomainError):
    code = "validation_error"
    status = HTTPStatus.BAD_REQUEST
    message = "Name and password are required"


class ConflictError(DomainError):
    code = "conflict"
    status = HTTPStatus.CONFLICT
    message = "Resource already exists"


class AuthenticationError(DomainError):
    # 400 rather than 401 to keep the status codes existing clients rely on
    code = "authentication_failed"
    status = HTTPStatus.BAD_REQUEST
    message = "User or password incorrect"


class InternalError(AppError):
    """Unexpected failure; the message sent to clients is always generic."""

    def __init__(
        self,
        code: str = "internal_error",
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            message=INTERNAL_ERROR_MESSAGE,
            context=context,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "success": False,
            "error": True,
        }
