# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Pick the SQL dialect from a connection string and turn it into an SQLAlchemy URL."""

from __future__ import annotations

import re
from enum import Enum


class Dialect(str, Enum):
    SQLITE = "sqlite"  # embedded file
    MYSQL = "mysql"  # client-server

    def __str__(self) -> str:
        return self.value


_SQLITE_FILE = re.compile(r"\.(db|sqlite|sqlite3)$", re.IGNORECASE)
_MEMORY_URLS = {":memory:", "file::memory:", "sqlite://", "sqlite:///:memory:"}


def resolve_dialect(url: str, override: str | None = None) -> Dialect:
    """Explicit override first, then the shape of the connection string."""

    forced = (override or "").strip().lower()
    if forced in (Dialect.SQLITE.value, Dialect.MYSQL.value):
        return Dialect(forced)

    candidate = (url or "").strip()
    if (
        candidate.startswith(("sqlite:", "sqlite+", "file:"))
        or candidate == ":memory:"
        or _SQLITE_FILE.search(candidate)
    ):
        return Dialect.SQLITE
    return Dialect.MYSQL


def is_memory_url(url: str) -> bool:
    return (url or "").strip() in _MEMORY_URLS


def normalize_url(url: str, dialect: Dialect) -> str:
    candidate = (url or "").strip()
    if dialect is Dialect.SQLITE:
        return _normalize_sqlite(candidate)
    return _normalize_mysql(candidate)


def _normalize_sqlite(url: str) -> str:
    if is_memory_url(url):
        return "sqlite://"
    if url.startswith(("sqlite://", "sqlite+")):
        return url
    if url.startswith("sqlite:"):
        return f"sqlite:///{url[len('sqlite:'):]}"
    if url.startswith("file:"):
        path = url[len("file:"):]
        if path.startswith("//"):
            path = path[2:]
        return f"sqlite:///{path}"
    return f"sqlite:///{url}"


def _normalize_mysql(url: str) -> str:
    if url.startswith("mysql://"):
        return "mysql+pymysql://" + url[len("mysql://"):]
    return url


__all__ = ["Dialect", "is_memory_url", "normalize_url", "resolve_dialect"]
