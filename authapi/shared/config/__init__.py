# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .settings import AppConfig, load_config

__all__ = ["AppConfig", "load_config"]
