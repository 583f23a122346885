# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class CredentialsRequestDTO(BaseModel):
    name: StrictStr = Field(min_length=1)
    password: StrictStr = Field(min_length=1)

    model_config = ConfigDict(extra="ignore")

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value


class StoredCredentialDTO(BaseModel):
    id: str = Field(serialization_alias="_id")
    name: str
    password: str | None = None


class CreateUserResponseDTO(BaseModel):
    message: str = "User created successfully"
    data: StoredCredentialDTO
    success: bool = True
    error: bool = False


class LoginResponseDTO(BaseModel):
    message: str = "Successfully logged in"
    token: str
    success: bool = True
    error: bool = False


class WelcomeResponseDTO(BaseModel):
    message: str = "Welcome to our application!"
    success: bool = True
    error: bool = False
