# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users.entities import TokenClaims, User
from .users.exceptions import (
    CredentialStoreError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingCredentialsError,
    UserAlreadyExistsError,
)
from .users.repositories import PasswordHasher, TokenIssuer, UserRepository

__all__ = [
    "CredentialStoreError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MissingCredentialsError",
    "PasswordHasher",
    "TokenClaims",
    "TokenIssuer",
    "User",
    "UserAlreadyExistsError",
    "UserRepository",
]
