# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Password hashing strategies."""

from __future__ import annotations

import hashlib
import hmac
import secrets

from dailytodo.domain.users.repositories import PasswordHasher

_SALT_BYTES = 16
_KEY_LENGTH = 64


class ScryptPasswordHasher(PasswordHasher):
    """Stores ``"<salt hex>:<derived key hex>"`` using scrypt.

    The cost parameters are fixed so stored hashes stay verifiable.
    """

    def __init__(self, *, n: int = 16384, r: int = 8, p: int = 1) -> None:
        self._n = n
        self._r = r
        self._p = p

    def _derive(self, password: str, salt: str) -> bytes:
        return hashlib.scrypt(
            password.encode("utf-8"),
            salt=salt.encode("utf-8"),
            n=self._n,
            r=self._r,
            p=self._p,
            maxmem=64 * 1024 * 1024,
            dklen=_KEY_LENGTH,
        )

    def hash(self, password: str) -> str:
        salt = secrets.token_hex(_SALT_BYTES)
        return f"{salt}:{self._derive(password, salt).hex()}"

    def verify(self, password: str, hashed: str) -> bool:
        salt, sep, key = (hashed or "").partition(":")
        if not sep or not salt or not key:
            return False
        try:
            stored_key = bytes.fromhex(key)
        except ValueError:
            return False
        if len(stored_key) != _KEY_LENGTH:
            return False
        return hmac.compare_digest(stored_key, self._derive(password, salt))
