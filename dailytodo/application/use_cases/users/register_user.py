# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from dailytodo.domain.users.entities import AuthenticatedUser, User
from dailytodo.domain.users.exceptions import UserAlreadyExistsError
from dailytodo.domain.users.repositories import (
    PasswordHasher,
    SessionTokenService,
    UserRepository,
)
from dailytodo.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: SessionTokenService,
        password_hasher: PasswordHasher,
        admin_username: str | None = None,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        self._admin_username = admin_username

    def execute(
        self, username: str, password: str, name: str | None = None
    ) -> tuple[AuthenticatedUser, str]:
        existing = self._users.find_by_username(username)
        if existing:
            raise UserAlreadyExistsError()
        now = datetime.now()
        role = "admin" if self._admin_username and username == self._admin_username else "user"
        user = User(
            id=0,
            username=username,
            password_hash=self._password_hasher.hash(password),
            name=name,
            email=None,
            role=role,
            created_at=now,
            updated_at=now,
            last_signed_in=now,
        )
        persisted = self._users.add(user)
        logger.info(f"users.register: created user_id={persisted.id} role={persisted.role}")
        return persisted.sanitized(), self._tokens.issue(persisted.id)
