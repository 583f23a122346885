# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import sys

from flask import Flask
from flask_cors import CORS
from pydantic import ValidationError
from pydantic_settings import SettingsError
from pymongo.errors import PyMongoError

from authapi.domain.users.repositories import UserRepository
from authapi.infrastructure.container import Container
from authapi.infrastructure.db import MongoStore
from authapi.shared.config import AppConfig, load_config
from authapi.shared.logging import logger, setup_logging
from authapi.shared.middleware.error_handler import configure_error_handling
from authapi.shared.middleware.request_logger import configure_request_logging
from authapi.shared.middleware.security_headers import configure_security_headers


class StartupError(RuntimeError):
    pass


def create_app(
    config: AppConfig | None = None,
    *,
    store: MongoStore | None = None,
    user_repository: UserRepository | None = None,
) -> Flask:
    config = config or load_config()
    if not config.token.secret:
        raise StartupError("JWT_SECRET is not set")

    container = Container(config, store=store, user_repository=user_repository)

    app = Flask(__name__)
    app.json.sort_keys = False
    app.extensions["authapi.container"] = container

    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_security_headers(app, enable_hsts=config.security.enable_hsts)

    origins = config.security.allowed_origins
    cors_kwargs: dict[str, object] = {"origins": origins}
    if origins == ["*"]:
        cors_kwargs["send_wildcard"] = True
    else:
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())

    logger.info("Flask app initialized")
    return app


def main() -> int:
    try:
        config = load_config()
    except (ValidationError, SettingsError) as exc:
        setup_logging()
        logger.error(f"startup: invalid configuration: {exc}")
        return 1

    setup_logging(config.log_level, config.log_file)

    if not config.token.secret:
        logger.error("startup: JWT_SECRET is not set, refusing to start")
        return 1

    try:
        with MongoStore.from_config(config.database) as store:
            app = create_app(config, store=store)
            logger.info(f"Server is running on port {config.port}")
            app.run(host=config.host, port=config.port)
    except PyMongoError as exc:
        logger.error(f"startup: database connection error: {exc}")
        return 1
    except StartupError as exc:
        logger.error(f"startup: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
