# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from authapi.application.use_cases.users.login_user import LoginUserUseCase
from authapi.application.use_cases.users.register_user import RegisterUserUseCase
from authapi.interfaces.http.dto.auth import (
    CreateUserResponseDTO,
    CredentialsRequestDTO,
    LoginResponseDTO,
    StoredCredentialDTO,
)
from authapi.shared.errors.validation import raise_validation_error
from authapi.shared.logging import logger

_CREATE_MISSING_MESSAGE = "Name and password are required"
_LOGIN_MISSING_MESSAGE = "All fields required"


def _parse_credentials(missing_message: str) -> CredentialsRequestDTO:
    try:
        return CredentialsRequestDTO.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc, missing_message, code="missing_fields")


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        expose_password_hash: bool = True,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._expose_password_hash = expose_password_hash

    def create(self) -> tuple[Response, int]:
        dto = _parse_credentials(_CREATE_MISSING_MESSAGE)

        user = self._register_use_case.execute(dto.name, dto.password)

        data = StoredCredentialDTO(
            id=user.id,
            name=user.name,
            password=user.password_hash if self._expose_password_hash else None,
        )
        payload = CreateUserResponseDTO(data=data).model_dump(
            by_alias=True, exclude_none=True
        )
        logger.info(f"auth.create: ok name={user.name}")
        return jsonify(payload), 201

    def login(self) -> tuple[Response, int]:
        dto = _parse_credentials(_LOGIN_MISSING_MESSAGE)

        token = self._login_use_case.execute(dto.name, dto.password)

        payload = LoginResponseDTO(token=token).model_dump()
        logger.info(f"auth.login: ok name={dto.name}")
        return jsonify(payload), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/create", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
