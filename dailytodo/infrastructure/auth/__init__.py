# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .session_auth import (
    SESSION_COOKIE_NAME,
    AuthedRequest,
    SessionAuthenticator,
    auth_required,
    authed_request,
    current_user,
    get_authenticator,
)

__all__ = [
    "AuthedRequest",
    "SESSION_COOKIE_NAME",
    "SessionAuthenticator",
    "auth_required",
    "authed_request",
    "current_user",
    "get_authenticator",
]
