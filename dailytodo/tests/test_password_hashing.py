from __future__ import annotations

import re

import pytest

from dailytodo.application.services.password_hashing import ScryptPasswordHasher


@pytest.fixture(scope="module")
def hasher() -> ScryptPasswordHasher:
    return ScryptPasswordHasher()


def test_hash_is_salt_and_key_in_hex(hasher: ScryptPasswordHasher) -> None:
    hashed = hasher.hash("secret123")

    assert re.fullmatch(r"[0-9a-f]{32}:[0-9a-f]{128}", hashed)
    assert "secret123" not in hashed


def test_verify_accepts_the_right_password(hasher: ScryptPasswordHasher) -> None:
    hashed = hasher.hash("secret123")

    assert hasher.verify("secret123", hashed) is True
    assert hasher.verify("secret124", hashed) is False


def test_same_password_gets_a_fresh_salt(hasher: ScryptPasswordHasher) -> None:
    first = hasher.hash("secret123")
    second = hasher.hash("secret123")

    assert first != second
    assert first.split(":")[0] != second.split(":")[0]


@pytest.mark.parametrize(
    "stored",
    [
        "",
        "no-separator-at-all",
        "abcdef:",
        ":" + "ab" * 64,
        "abcdef:not-hex-at-all",
        "abcdef:abcd",
    ],
)
def test_malformed_stored_value_is_rejected_without_raising(
    hasher: ScryptPasswordHasher, stored: str
) -> None:
    assert hasher.verify("secret123", stored) is False
