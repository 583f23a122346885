# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .base import (
    AppError,
    AuthenticationError,
    ConflictError,
    DomainError,
    InternalError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "AuthenticationError",
    "ConflictError",
    "DomainError",
    "InternalError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
