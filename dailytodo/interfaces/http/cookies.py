# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from flask import Request, Response

from dailytodo.infrastructure.auth import SESSION_COOKIE_NAME
from dailytodo.shared.config import load_config

ONE_YEAR_SECONDS = 60 * 60 * 24 * 365


def _is_secure_request(req: Request) -> bool:
    if req.is_secure:
        return True
    forwarded = req.headers.get("X-Forwarded-Proto", "")
    return "https" in [proto.strip().lower() for proto in forwarded.split(",")]


def session_cookie_options(req: Request) -> dict[str, Any]:
    security = load_config().security
    secure = bool(security.cookie_secure) or _is_secure_request(req)
    options: dict[str, Any] = {
        "httponly": True,
        "path": "/",
        "secure": secure,
        "samesite": "None" if secure else "Lax",
    }
    if security.cookie_domain:
        options["domain"] = security.cookie_domain
    return options


def set_session_cookie(response: Response, req: Request, token: str) -> None:
    response.set_cookie(
        SESSION_COOKIE_NAME, token, max_age=ONE_YEAR_SECONDS, **session_cookie_options(req)
    )


def clear_session_cookie(response: Response, req: Request) -> None:
    response.set_cookie(SESSION_COOKIE_NAME, "", max_age=-1, **session_cookie_options(req))


__all__ = [
    "ONE_YEAR_SECONDS",
    "clear_session_cookie",
    "session_cookie_options",
    "set_session_cookie",
]
