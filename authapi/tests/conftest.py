from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from authapi.app import create_app
from authapi.shared.config.settings import AppConfig, PasswordConfig, TokenConfig
from authapi.tests.doubles import TEST_SECRET, InMemoryUserRepository


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def app_config() -> AppConfig:
    return AppConfig(
        app_env="test",
        token=TokenConfig(secret=TEST_SECRET),
        hashing=PasswordConfig(hash_method="pbkdf2:sha256:1000"),
    )


@pytest.fixture()
def app(app_config: AppConfig, users: InMemoryUserRepository) -> Flask:
    flask_app = create_app(app_config, user_repository=users)
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()
