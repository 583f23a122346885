# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta
from functools import cached_property, partial

from authapi.application.services.password_hashing import WerkzeugPasswordHasher
from authapi.application.services.token_issuer import JwtTokenIssuer
from authapi.application.use_cases.users.login_user import LoginUserUseCase
from authapi.application.use_cases.users.register_user import RegisterUserUseCase
from authapi.domain.users.repositories import UserRepository
from authapi.infrastructure.db import MongoStore
from authapi.infrastructure.health import check_database
from authapi.infrastructure.repositories.users.mongo_user_repository import (
    MongoUserRepository,
)
from authapi.interfaces.http.controllers.auth_controller import AuthController
from authapi.interfaces.http.controllers.misc_controller import MiscController
from authapi.shared.config import AppConfig


class Container:
    """Wires the auth use cases around an explicitly supplied store.

    Either ``store`` (production) or ``user_repository`` (tests, alternative
    backends) must be given.
    """

    def __init__(
        self,
        config: AppConfig,
        *,
        store: MongoStore | None = None,
        user_repository: UserRepository | None = None,
    ) -> None:
        if store is None and user_repository is None:
            raise ValueError("Container needs a store or a user repository")
        self._config = config
        self._store = store
        self._user_repository = user_repository

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(
            method=self._config.hashing.hash_method,
            salt_length=self._config.hashing.salt_length,
        )

    @cached_property
    def token_issuer(self) -> JwtTokenIssuer:
        return JwtTokenIssuer(
            self._config.token.secret,
            algorithm=self._config.token.algorithm,
            expires_in=timedelta(seconds=self._config.token.expires_seconds),
        )

    @cached_property
    def user_repository(self) -> UserRepository:
        if self._user_repository is not None:
            return self._user_repository
        assert self._store is not None
        return MongoUserRepository(self._store.users)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            tokens=self.token_issuer,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            expose_password_hash=self._config.response.expose_password_hash,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        health_check: Callable[[], bool] | None = None
        if self._store is not None:
            health_check = partial(check_database, self._store)
        return MiscController(health_check=health_check)
