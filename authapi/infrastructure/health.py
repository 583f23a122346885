# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authapi.infrastructure.db import MongoStore, ping


def check_database(store: MongoStore) -> bool:
    ping(store)
    return True


__all__ = ["check_database"]
