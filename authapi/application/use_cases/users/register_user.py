# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authapi.domain.users.entities import User
from authapi.domain.users.exceptions import MissingCredentialsError, UserAlreadyExistsError
from authapi.domain.users.repositories import PasswordHasher, UserRepository
from authapi.shared.logging import logger


def normalize_name(name: str | None) -> str:
    return name.strip() if isinstance(name, str) else ""


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, name: str, password: str) -> User:
        name = normalize_name(name)
        if not name or not password:
            raise MissingCredentialsError()

        if self._users.find_by_name(name) is not None:
            logger.info(f"auth.register: name taken name={name}")
            raise UserAlreadyExistsError()

        hashed = self._password_hasher.hash(password)
        # a concurrent register for the same name fails here with
        # UserAlreadyExistsError from the store's unique index
        persisted = self._users.add(User(id="", name=name, password_hash=hashed))
        logger.info(f"auth.register: ok name={persisted.name} id={persisted.id}")
        return persisted
