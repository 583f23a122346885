# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import TokenClaims, User


class UserRepository(Protocol):
    def find_by_name(self, name: str) -> User | None: ...

    def add(self, user: User) -> User:
        """Persist ``user``; raises ``UserAlreadyExistsError`` on a taken name."""
        ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenIssuer(Protocol):
    def issue(self, name: str) -> str: ...
    def verify(self, token: str) -> TokenClaims: ...
