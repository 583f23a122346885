# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError

from authapi.domain.users.entities import User
from authapi.domain.users.exceptions import CredentialStoreError, UserAlreadyExistsError
from authapi.domain.users.repositories import UserRepository
from authapi.shared.logging import logger


def _to_domain(doc: dict[str, Any]) -> User:
    return User(
        id=str(doc["_id"]),
        name=doc["name"],
        password_hash=doc["password"],
    )


class MongoUserRepository(UserRepository):
    """Credential documents shaped ``{_id, name, password}``.

    ``password`` holds the hash, never the plaintext. Uniqueness of ``name``
    is enforced by the collection's unique index.
    """

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    def find_by_name(self, name: str) -> User | None:
        try:
            doc = self._collection.find_one({"name": name})
        except PyMongoError as exc:
            logger.error(f"users.find_by_name: store error {type(exc).__name__}")
            raise CredentialStoreError() from exc
        if not doc:
            return None
        return _to_domain(doc)

    def add(self, user: User) -> User:
        doc: dict[str, Any] = {"name": user.name, "password": user.password_hash}
        try:
            result = self._collection.insert_one(doc)
        except DuplicateKeyError as exc:
            logger.info(f"users.add: duplicate name={user.name}")
            raise UserAlreadyExistsError() from exc
        except PyMongoError as exc:
            logger.error(f"users.add: store error {type(exc).__name__}")
            raise CredentialStoreError() from exc
        return User(
            id=str(result.inserted_id),
            name=user.name,
            password_hash=user.password_hash,
        )
