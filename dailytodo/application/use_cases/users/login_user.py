# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from dailytodo.domain.users.entities import AuthenticatedUser
from dailytodo.domain.users.exceptions import InvalidCredentialsError
from dailytodo.domain.users.repositories import (
    PasswordHasher,
    SessionTokenService,
    UserRepository,
)
from dailytodo.shared.logging import logger

# well-formed "salt:key" so unknown usernames pay the same hashing cost
_DUMMY_HASH = f"{'0' * 32}:{'0' * 128}"


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: SessionTokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(
        self, username: str, password: str, ip_address: str | None = None
    ) -> tuple[AuthenticatedUser, str]:
        user = self._users.find_by_username(username)
        if user is None:
            self._password_hasher.verify(password, _DUMMY_HASH)
            password_valid = False
        else:
            password_valid = self._password_hasher.verify(password, user.password_hash)

        if not password_valid:
            logger.info(f"users.login: rejected from {ip_address or 'unknown'}")
            raise InvalidCredentialsError()

        now = datetime.now()
        self._users.update_last_signed_in(user.id, now)
        token = self._tokens.issue(user.id)
        return replace(user, last_signed_in=now).sanitized(), token
