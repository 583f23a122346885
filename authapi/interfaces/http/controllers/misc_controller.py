# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from flask import Blueprint, jsonify

from authapi.interfaces.http.dto.auth import WelcomeResponseDTO
from authapi.shared.logging import logger


class MiscController:
    def __init__(self, *, health_check: Callable[[], bool] | None = None) -> None:
        self._health_check = health_check

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        return bp

    def index(self):
        return jsonify(WelcomeResponseDTO().model_dump()), 200

    def health(self):
        status: dict[str, object] = {"ok": True}
        if self._health_check is None:
            return jsonify(status), 200
        try:
            self._health_check()
            status["database"] = "ok"
        except Exception as exc:
            logger.warning(f"health: database check failed {type(exc).__name__}")
            status["ok"] = False
            status["database"] = "error"
            return jsonify(status), 503
        return jsonify(status), 200
