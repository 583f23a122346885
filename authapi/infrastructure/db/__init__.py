# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .session import MongoStore, ping

__all__ = ["MongoStore", "ping"]
