# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from types import TracebackType
from typing import Any

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from authapi.shared.config.settings import DatabaseConfig
from authapi.shared.logging import logger, sanitize_message


class MongoStore:
    """Owns the MongoDB client for the lifetime of the process.

    Construct it once at startup and hand it to whatever needs the store;
    use it as a context manager so the client is released on shutdown.
    """

    def __init__(
        self,
        url: str,
        db_name: str,
        *,
        collection: str = "users",
        timeout_ms: int = 5000,
        client: MongoClient | None = None,
    ) -> None:
        self._url = url
        self._db_name = db_name
        self._collection_name = collection
        self._timeout_ms = timeout_ms
        self._client = client

    @classmethod
    def from_config(cls, config: DatabaseConfig) -> MongoStore:
        return cls(
            config.url,
            config.name,
            collection=config.collection,
            timeout_ms=config.timeout_ms,
        )

    @property
    def client(self) -> MongoClient:
        if self._client is None:
            self._client = MongoClient(
                self._url,
                serverSelectionTimeoutMS=self._timeout_ms,
                retryWrites=True,
                w="majority",
            )
        return self._client

    @property
    def database(self) -> Database:
        return self.client[self._db_name]

    @property
    def users(self) -> Collection:
        return self.database[self._collection_name]

    def connect(self) -> None:
        """Fail fast: raises ``PyMongoError`` when the server is unreachable."""
        logger.info(f"db: connecting to {sanitize_message(self._url)} db={self._db_name}")
        self.client.admin.command("ping")
        self.ensure_indexes()
        logger.info("db: successfully connected to database")

    def ensure_indexes(self) -> None:
        self.users.create_index([("name", ASCENDING)], unique=True, name="name_unique")
        logger.debug(f"db: ensured unique index on {self._collection_name}.name")

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("db: connection closed")

    def __enter__(self) -> MongoStore:
        try:
            self.connect()
        except Exception:
            self.close()
            raise
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def ping(store: MongoStore) -> dict[str, Any]:
    return store.client.admin.command("ping")
