from __future__ import annotations

from dailytodo.application.services.session_tokens import JwtSessionTokenService
from dailytodo.shared.logging import sanitize_message


def test_session_tokens_are_redacted() -> None:
    token = JwtSessionTokenService("s3cret").issue(1)

    message = sanitize_message(f"cookie app_session_id={token} rejected, raw={token}")

    assert token not in message
    assert "***JWT***" in message or "***REDACTED***" in message


def test_passwords_and_hashes_are_redacted() -> None:
    stored = "0" * 32 + ":" + "f" * 128

    message = sanitize_message(f"password=hunter22 stored {stored}")

    assert "hunter22" not in message
    assert stored not in message


def test_database_url_credentials_are_redacted() -> None:
    message = sanitize_message("connecting to mysql+pymysql://todo:p4ssw0rd@db:3306/todos")

    assert "p4ssw0rd" not in message
    assert "mysql+pymysql://todo:***REDACTED***@db:3306/todos" in message


def test_plain_messages_are_untouched() -> None:
    assert sanitize_message("todos.list: 3 rows") == "todos.list: 3 rows"
