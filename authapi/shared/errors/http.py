# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from authapi.shared.logging import logger

from .base import AppError, InternalError


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    response = jsonify(error.to_dict())
    return response, error.status


def register_error_handler(app: Flask, *, debug_mode: bool = False) -> None:
    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            cause = exc.__cause__ or exc
            logger.opt(exception=cause).error(
                f"Internal error {exc.code} on {request.method} {request.path}: {cause!r}"
            )
        else:
            logger.warning(
                f"Handled application error {exc.code} on {request.method} {request.path}"
            )
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        status = exc.code or HTTPStatus.INTERNAL_SERVER_ERROR
        payload = {
            "message": exc.description or exc.name,
            "code": exc.name.lower().replace(" ", "_"),
            "success": False,
            "error": True,
        }
        return jsonify(payload), status

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"query={dict(request.args)}, body_size={len(request.data)}"
            )
        else:
            logger.opt(exception=exc).error(
                f"Error: {type(exc).__name__} on {request.method} {request.path}"
            )
        return handle_app_error(InternalError())
