# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""JWT token issuance.

Tokens are stateless: nothing is stored server-side, and a token stops
being accepted once its ``exp`` claim has passed.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt

from authapi.domain.users.entities import TokenClaims
from authapi.domain.users.exceptions import InvalidTokenError
from authapi.domain.users.repositories import TokenIssuer


class JwtTokenIssuer(TokenIssuer):
    DEFAULT_EXPIRES_SECONDS = 60
    DEFAULT_ALGORITHM = "HS256"

    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = DEFAULT_ALGORITHM,
        expires_in: timedelta = timedelta(seconds=DEFAULT_EXPIRES_SECONDS),
    ) -> None:
        if not secret:
            msg = "JWT secret cannot be empty"
            raise ValueError(msg)

        self._secret = secret
        self._algorithm = algorithm
        self._expires_in = expires_in

    def issue(self, name: str) -> str:
        now = datetime.now(UTC)
        payload = {
            "name": name,
            "sub": name,
            "iat": now,
            "exp": now + self._expires_in,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Decode ``token`` and return its claims.

        Raises ``InvalidTokenError`` when the signature does not match, the
        token has expired, or a required claim is missing.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat", "name"]},
            )
            return TokenClaims(
                name=payload["name"],
                issued_at=datetime.fromtimestamp(payload["iat"], tz=UTC),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=UTC),
            )
        except jwt.ExpiredSignatureError as exc:
            raise InvalidTokenError("Token has expired") from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError() from exc
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidTokenError() from exc
