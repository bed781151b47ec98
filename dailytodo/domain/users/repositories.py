# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from .entities import Role, User


class UserRepository(Protocol):
    def find_by_username(self, username: str) -> User | None: ...
    def find_by_id(self, user_id: int) -> User | None: ...
    def add(self, user: User) -> User: ...
    def update_last_signed_in(self, user_id: int, when: datetime) -> None: ...
    def set_role(self, user_id: int, role: Role) -> None: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class SessionTokenService(Protocol):
    def issue(self, user_id: int) -> str: ...
    def verify(self, token: str) -> int | None: ...
