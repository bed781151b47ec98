from __future__ import annotations

import base64
import json
import time

import pytest
from jose import jwt

from dailytodo.application.services.session_tokens import (
    SESSION_TTL_SECONDS,
    JwtSessionTokenService,
)
from dailytodo.shared.errors import ConfigurationError

SECRET = "unit-test-secret"


def _b64(data: dict) -> str:
    raw = json.dumps(data, separators=(",", ":")).encode()
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()


def test_issue_then_verify_returns_user_id() -> None:
    service = JwtSessionTokenService(SECRET)

    token = service.issue(42)

    assert service.verify(token) == 42


def test_token_carries_user_id_and_one_year_expiry() -> None:
    now = 1_700_000_000.0
    service = JwtSessionTokenService(SECRET, clock=lambda: now)

    claims = jwt.get_unverified_claims(service.issue(7))
    header = jwt.get_unverified_header(service.issue(7))

    assert claims["userId"] == 7
    assert claims["exp"] == int(now + SESSION_TTL_SECONDS)
    assert SESSION_TTL_SECONDS == 31_536_000
    assert header["alg"] == "HS256"
    assert header["typ"] == "JWT"


def test_expired_token_is_rejected() -> None:
    issuer = JwtSessionTokenService(SECRET, clock=lambda: time.time() - 2 * SESSION_TTL_SECONDS)
    verifier = JwtSessionTokenService(SECRET)

    assert verifier.verify(issuer.issue(1)) is None


def test_token_signed_with_another_secret_is_rejected() -> None:
    token = JwtSessionTokenService("some-other-secret").issue(1)

    assert JwtSessionTokenService(SECRET).verify(token) is None


def test_tampered_payload_is_rejected() -> None:
    service = JwtSessionTokenService(SECRET)
    header, _, signature = service.issue(1).split(".")
    forged = ".".join([header, _b64({"userId": 2, "exp": int(time.time()) + 60}), signature])

    assert service.verify(forged) is None


def test_unsigned_token_is_rejected() -> None:
    unsigned = ".".join(
        [
            _b64({"alg": "none", "typ": "JWT"}),
            _b64({"userId": 1, "exp": int(time.time()) + 60}),
            "",
        ]
    )

    assert JwtSessionTokenService(SECRET).verify(unsigned) is None


def test_other_hmac_algorithm_is_rejected() -> None:
    token = jwt.encode({"userId": 1, "exp": int(time.time()) + 60}, SECRET, algorithm="HS512")

    assert JwtSessionTokenService(SECRET).verify(token) is None


@pytest.mark.parametrize(
    ("user_id", "expected"),
    [("42", 42), ("abc", None), ("", None), (None, None), (True, None), (1.5, None)],
)
def test_user_id_claim_shapes(user_id, expected) -> None:
    claims = {"exp": int(time.time()) + 60}
    if user_id is not None:
        claims["userId"] = user_id
    token = jwt.encode(claims, SECRET, algorithm="HS256")

    assert JwtSessionTokenService(SECRET).verify(token) == expected


def test_garbage_token_is_rejected() -> None:
    assert JwtSessionTokenService(SECRET).verify("not-a-token") is None


def test_empty_secret_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        JwtSessionTokenService("")
