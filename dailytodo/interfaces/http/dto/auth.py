# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from dailytodo.domain.users.entities import Role

from .common import CamelModel


class RegisterRequestDTO(BaseModel):
    username: str = Field(min_length=3, max_length=32)
    password: str = Field(min_length=6, max_length=128)
    name: str | None = Field(default=None, max_length=255)


class LoginRequestDTO(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=128)


class UserDTO(CamelModel):
    id: int
    username: str
    name: str | None
    email: str | None
    role: Role
    created_at: datetime
    updated_at: datetime
    last_signed_in: datetime
