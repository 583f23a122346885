from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from authapi import app as app_module
from authapi.app import StartupError, create_app
from authapi.shared.config.settings import AppConfig, TokenConfig
from authapi.tests.doubles import TEST_SECRET, InMemoryUserRepository


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(app_module, "setup_logging", lambda *args, **kwargs: None)


def _use_config(monkeypatch: pytest.MonkeyPatch, config: AppConfig) -> None:
    monkeypatch.setattr(app_module, "load_config", lambda: config)


def test_create_app_requires_secret() -> None:
    config = AppConfig(app_env="test", token=TokenConfig(secret=""))

    with pytest.raises(StartupError):
        create_app(config, user_repository=InMemoryUserRepository())


def test_main_exits_nonzero_without_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    _use_config(monkeypatch, AppConfig(app_env="test", token=TokenConfig(secret="")))
    store_factory = MagicMock()
    monkeypatch.setattr(app_module.MongoStore, "from_config", store_factory)

    assert app_module.main() == 1
    store_factory.assert_not_called()


def test_main_exits_nonzero_when_database_unreachable(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _use_config(monkeypatch, AppConfig(app_env="test", token=TokenConfig(secret=TEST_SECRET)))
    client = MagicMock()
    client.admin.command.side_effect = ServerSelectionTimeoutError("unreachable")
    monkeypatch.setattr(
        app_module.MongoStore,
        "from_config",
        classmethod(lambda cls, cfg: cls(cfg.url, cfg.name, client=client)),
    )
    run = MagicMock()
    monkeypatch.setattr(app_module.Flask, "run", run)

    assert app_module.main() == 1
    run.assert_not_called()
    client.close.assert_called_once()


def test_main_exits_nonzero_on_invalid_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_config() -> AppConfig:
        return AppConfig(app_env="production", token=TokenConfig(secret="dev"))

    monkeypatch.setattr(app_module, "load_config", broken_config)

    assert app_module.main() == 1


def test_main_serves_after_successful_connect(monkeypatch: pytest.MonkeyPatch) -> None:
    config = AppConfig(
        app_env="test", host="0.0.0.0", port=3456, token=TokenConfig(secret=TEST_SECRET)
    )
    _use_config(monkeypatch, config)
    client = MagicMock()
    monkeypatch.setattr(
        app_module.MongoStore,
        "from_config",
        classmethod(lambda cls, cfg: cls(cfg.url, cfg.name, client=client)),
    )
    run = MagicMock()
    monkeypatch.setattr(app_module.Flask, "run", run)

    assert app_module.main() == 0
    run.assert_called_once_with(host="0.0.0.0", port=3456)
    client.close.assert_called_once()
