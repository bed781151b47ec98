# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, time-limited session tokens carried in the session cookie."""

from __future__ import annotations

import time
from collections.abc import Callable

from jose import JWTError, jwt

from dailytodo.domain.users.repositories import SessionTokenService
from dailytodo.shared.errors import ConfigurationError
from dailytodo.shared.logging import logger

SESSION_ALGORITHM = "HS256"
SESSION_TTL_SECONDS = 60 * 60 * 24 * 365


class JwtSessionTokenService(SessionTokenService):
    def __init__(
        self,
        secret: str,
        *,
        ttl_seconds: int = SESSION_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not secret:
            raise ConfigurationError("JWT_SECRET is not configured")
        self._secret = secret
        self._ttl = ttl_seconds
        self._clock = clock

    @property
    def ttl_seconds(self) -> int:
        return self._ttl

    def issue(self, user_id: int) -> str:
        expires_at = int(self._clock() + self._ttl)
        return jwt.encode(
            {"userId": user_id, "exp": expires_at},
            self._secret,
            algorithm=SESSION_ALGORITHM,
            headers={"typ": "JWT"},
        )

    def verify(self, token: str) -> int | None:
        try:
            payload = jwt.decode(token, self._secret, algorithms=[SESSION_ALGORITHM])
        except (JWTError, ValueError, TypeError) as exc:
            logger.warning(f"session: verification failed ({type(exc).__name__}: {exc})")
            return None

        raw_user_id = payload.get("userId")
        if isinstance(raw_user_id, bool):
            return None
        if isinstance(raw_user_id, int):
            return raw_user_id
        if isinstance(raw_user_id, str) and raw_user_id.strip():
            try:
                return int(raw_user_id.strip())
            except ValueError:
                pass
        logger.warning("session: token carries no usable user id")
        return None


__all__ = ["JwtSessionTokenService", "SESSION_ALGORITHM", "SESSION_TTL_SECONDS"]
