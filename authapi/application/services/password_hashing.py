# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from authapi.domain.users.repositories import PasswordHasher

DEFAULT_METHOD = "pbkdf2:sha256:600000"
DEFAULT_SALT_LENGTH = 16


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted one-way hashing with a fixed work factor.

    The work factor is part of ``method`` (``pbkdf2:sha256:<iterations>`` or
    ``scrypt:<n>:<r>:<p>``) and is recorded in every hash, so stored hashes
    keep verifying after the configured method changes.
    """

    def __init__(
        self,
        method: str = DEFAULT_METHOD,
        salt_length: int = DEFAULT_SALT_LENGTH,
    ) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        return str(
            generate_password_hash(
                password, method=self._method, salt_length=self._salt_length
            )
        )

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bool(check_password_hash(hashed, password))
        except ValueError:
            # malformed or unsupported stored hash
            return False
