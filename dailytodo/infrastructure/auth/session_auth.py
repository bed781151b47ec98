# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Resolve the calling user from the session cookie."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, TypeVar, cast

from flask import Request, current_app, g, request

from dailytodo.domain.users.entities import AuthenticatedUser
from dailytodo.domain.users.repositories import SessionTokenService, UserRepository
from dailytodo.shared.errors import AuthenticationError
from dailytodo.shared.logging import logger

SESSION_COOKIE_NAME = "app_session_id"
EXTENSION_KEY = "dailytodo.authenticator"

F = TypeVar("F", bound=Callable[..., Any])


class AuthedRequest(Request):
    user_id: int


def _describe(req: Request) -> str:
    client = req.headers.get("X-Forwarded-For", req.remote_addr)
    return f"{req.method} {req.path} from {client}"


class SessionAuthenticator:
    def __init__(self, *, users: UserRepository, tokens: SessionTokenService) -> None:
        self._users = users
        self._tokens = tokens

    def authenticate(self, req: Request) -> AuthenticatedUser:
        """Every failure surfaces as the same ``forbidden``; the cause is only logged."""

        token = req.cookies.get(SESSION_COOKIE_NAME, "")
        if not token:
            logger.debug(f"auth: no session cookie on {_describe(req)}")
            raise AuthenticationError()

        user_id = self._tokens.verify(token)
        if user_id is None:
            logger.warning(f"auth: invalid session on {_describe(req)}")
            raise AuthenticationError()

        user = self._users.find_by_id(user_id)
        if user is None:
            logger.warning(f"auth: session for unknown user_id={user_id} on {_describe(req)}")
            raise AuthenticationError()

        return user.sanitized()

    def try_authenticate(self, req: Request) -> AuthenticatedUser | None:
        try:
            return self.authenticate(req)
        except AuthenticationError:
            return None

    def init_app(self, app) -> None:
        app.extensions[EXTENSION_KEY] = self


def get_authenticator() -> SessionAuthenticator:
    authenticator = current_app.extensions.get(EXTENSION_KEY)
    if authenticator is None:
        raise RuntimeError("SessionAuthenticator is not registered on this app")
    return cast(SessionAuthenticator, authenticator)


def authed_request() -> AuthedRequest:
    return cast(AuthedRequest, request)


def current_user() -> AuthenticatedUser:
    user = g.get("user")
    if user is None:
        raise AuthenticationError()
    return cast(AuthenticatedUser, user)


def auth_required(f: F) -> F:
    @wraps(f)
    def inner(*args, **kwargs):
        user = get_authenticator().authenticate(request)
        g.user = user
        g.user_id = user.id
        request.user_id = user.id  # type: ignore[attr-defined]
        logger.debug(f"auth: ok user_id={user.id} {request.method} {request.path}")
        return f(*args, **kwargs)

    return cast(F, inner)


__all__ = [
    "AuthedRequest",
    "SESSION_COOKIE_NAME",
    "SessionAuthenticator",
    "auth_required",
    "authed_request",
    "current_user",
    "get_authenticator",
]
