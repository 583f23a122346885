# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from functools import lru_cache
from typing import Annotated

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_INSECURE_SECRETS = ("dev", "development", "test", "secret", "changeme")


_SECTION_CONFIG = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    extra="ignore",
    validate_by_name=True,
)


def _parse_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes")
    return bool(value)


class DatabaseConfig(BaseSettings):
    url: str = Field("mongodb://localhost:27017", alias="MONGODB_URI")
    name: str = Field("auth", alias="DB_NAME")
    collection: str = Field("users", alias="MONGODB_COLLECTION")
    timeout_ms: int = Field(5000, ge=100, alias="MONGODB_TIMEOUT_MS")

    model_config = _SECTION_CONFIG


class TokenConfig(BaseSettings):
    secret: str = Field("", validation_alias=AliasChoices("JWT_SECRET", "JWT_TOKEN"))
    algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    expires_seconds: int = Field(60, ge=1, alias="JWT_EXPIRES_SECONDS")

    model_config = _SECTION_CONFIG


class PasswordConfig(BaseSettings):
    # werkzeug method string; the trailing number is the work factor
    hash_method: str = Field("pbkdf2:sha256:600000", alias="PASSWORD_HASH_METHOD")
    salt_length: int = Field(16, ge=8, alias="PASSWORD_SALT_LENGTH")

    model_config = _SECTION_CONFIG


class SecurityConfig(BaseSettings):
    allowed_origins: Annotated[list[str], NoDecode] = Field(["*"], alias="ALLOWED_ORIGINS")
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = _SECTION_CONFIG

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("enable_hsts", mode="before")
    @classmethod
    def _parse_hsts(cls, value: str | bool) -> bool:
        return _parse_bool(value)


class ResponseConfig(BaseSettings):
    expose_password_hash: bool = Field(True, alias="EXPOSE_PASSWORD_HASH")

    model_config = _SECTION_CONFIG

    @field_validator("expose_password_hash", mode="before")
    @classmethod
    def _parse_expose(cls, value: str | bool) -> bool:
        return _parse_bool(value)


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _token_config_factory() -> TokenConfig:
    return TokenConfig()  # type: ignore[call-arg]


def _password_config_factory() -> PasswordConfig:
    return PasswordConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


def _response_config_factory() -> ResponseConfig:
    return ResponseConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(3000, ge=1, le=65535, alias="PORT")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: str | None = Field(None, alias="LOG_FILE")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    token: TokenConfig = Field(default_factory=_token_config_factory)
    hashing: PasswordConfig = Field(default_factory=_password_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)
    response: ResponseConfig = Field(default_factory=_response_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="AUTHAPI_",
        env_file_encoding="utf-8",
        validate_assignment=True,
        validate_by_name=True,
        extra="ignore",
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        return _parse_bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self
        if self.token.secret.lower() in _INSECURE_SECRETS:
            raise ValueError(
                "JWT_SECRET must be a strong random value in production"
            )
        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "load_config"]
