# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authapi.application.use_cases.users.register_user import normalize_name
from authapi.domain.users.exceptions import InvalidCredentialsError, MissingCredentialsError
from authapi.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository
from authapi.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        tokens: TokenIssuer,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._tokens = tokens

    def execute(self, name: str, password: str) -> str:
        name = normalize_name(name)
        if not name or not password:
            raise MissingCredentialsError("All fields required")

        user = self._users.find_by_name(name)
        if user is None:
            logger.info(f"auth.login: unknown name={name}")
            raise InvalidCredentialsError()

        if not self._password_hasher.verify(password, user.password_hash):
            logger.info(f"auth.login: password mismatch name={name}")
            raise InvalidCredentialsError()

        token = self._tokens.issue(user.name)
        logger.info(f"auth.login: ok name={user.name}")
        return token
