# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authapi.shared.errors.base import (
    AuthenticationError,
    ConflictError,
    InternalError,
    ValidationError,
)


class MissingCredentialsError(ValidationError):
    code = "missing_fields"
    message = "Name and password are required"


class UserAlreadyExistsError(ConflictError):
    code = "user_already_exists"
    message = "User already exists"


class InvalidCredentialsError(AuthenticationError):
    # One message for unknown name and wrong password alike
    code = "invalid_credentials"
    message = "User or password incorrect"


class InvalidTokenError(AuthenticationError):
    code = "invalid_token"
    message = "Token is invalid or expired"


class CredentialStoreError(InternalError):
    def __init__(self) -> None:
        super().__init__("credential_store_unavailable")
