from __future__ import annotations

from datetime import datetime
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from dailytodo.application.use_cases.users.register_user import RegisterUserUseCase
from dailytodo.domain.users.entities import AuthenticatedUser
from dailytodo.infrastructure.auth import SessionAuthenticator
from dailytodo.interfaces.http.controllers.auth_controller import AuthController
from dailytodo.shared.middleware.error_handler import configure_error_handling

NOW = datetime(2024, 1, 17, 12, 0)


def _public_user(username: str) -> AuthenticatedUser:
    return AuthenticatedUser(
        id=1,
        username=username,
        name=None,
        email=None,
        role="user",
        created_at=NOW,
        updated_at=NOW,
        last_signed_in=NOW,
    )


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def test_register_endpoint_sets_cookie(flask_app: Flask) -> None:
    register_called: dict[str, tuple] = {}

    class StubRegister:
        def execute(self, username: str, password: str, name: str | None = None):
            register_called["args"] = (username, password, name)
            return _public_user(username), "token123"

    controller = AuthController(
        register_use_case=cast(RegisterUserUseCase, StubRegister()),
        login_use_case=MagicMock(),
        authenticator=MagicMock(),
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/register", json={"username": "alice", "password": "secret123"}
        )

    assert response.status_code == 201
    assert register_called["args"] == ("alice", "secret123", None)
    cookie = response.headers["Set-Cookie"]
    assert cookie.startswith("app_session_id=token123")
    assert "HttpOnly" in cookie
    assert "Max-Age=31536000" in cookie
    assert "Path=/" in cookie
    assert "SameSite=Lax" in cookie
    body = response.get_json()
    assert body["username"] == "alice"
    assert body["lastSignedIn"] == "2024-01-17T12:00:00"
    assert "passwordHash" not in body


def test_register_over_https_proxy_gets_secure_cookie(flask_app: Flask) -> None:
    register = MagicMock()
    register.execute.return_value = (_public_user("alice"), "token123")
    controller = AuthController(
        register_use_case=register, login_use_case=MagicMock(), authenticator=MagicMock()
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/register",
            json={"username": "alice", "password": "secret123"},
            headers={"X-Forwarded-Proto": "https"},
        )

    cookie = response.headers["Set-Cookie"]
    assert "Secure" in cookie
    assert "SameSite=None" in cookie


@pytest.mark.parametrize(
    "payload",
    [
        {"username": "a"},
        {"username": "ab", "password": "secret123"},
        {"username": "alice", "password": "12345"},
        {"username": "x" * 33, "password": "secret123"},
    ],
)
def test_register_invalid_payload_returns_400(flask_app: Flask, payload: dict) -> None:
    register = MagicMock()
    controller = AuthController(
        register_use_case=register, login_use_case=MagicMock(), authenticator=MagicMock()
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/auth/register", json=payload)

    assert response.status_code == 400
    assert response.get_json()["error"] == "validation_error"
    register.execute.assert_not_called()


def test_me_without_session_returns_null(flask_app: Flask) -> None:
    authenticator = MagicMock(spec=SessionAuthenticator)
    authenticator.try_authenticate.return_value = None
    controller = AuthController(
        register_use_case=MagicMock(), login_use_case=MagicMock(), authenticator=authenticator
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.get("/api/auth/me")

    assert response.status_code == 200
    assert response.get_json() is None


def test_logout_expires_cookie(flask_app: Flask) -> None:
    controller = AuthController(
        register_use_case=MagicMock(), login_use_case=MagicMock(), authenticator=MagicMock()
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/auth/logout")

    assert response.status_code == 200
    assert response.get_json() == {"success": True}
    cookie = response.headers["Set-Cookie"]
    assert cookie.startswith("app_session_id=;")
    assert "Max-Age=-1" in cookie
