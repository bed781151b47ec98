# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

Role = Literal["user", "admin"]


@dataclass(slots=True, frozen=True)
class AuthenticatedUser:
    """User as seen past the credential boundary: no password hash."""

    id: int
    username: str
    name: str | None
    email: str | None
    role: Role
    created_at: datetime
    updated_at: datetime
    last_signed_in: datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    password_hash: str
    name: str | None
    email: str | None
    role: Role
    created_at: datetime
    updated_at: datetime
    last_signed_in: datetime

    def sanitized(self) -> AuthenticatedUser:
        return AuthenticatedUser(
            id=self.id,
            username=self.username,
            name=self.name,
            email=self.email,
            role=self.role,
            created_at=self.created_at,
            updated_at=self.updated_at,
            last_signed_in=self.last_signed_in,
        )
