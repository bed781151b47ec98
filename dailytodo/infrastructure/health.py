# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dailytodo.infrastructure.db.session import Database


def check_database(database: Database) -> dict[str, object]:
    healthy = database.check()
    return {
        "ok": healthy,
        "database": "ok" if healthy else "unavailable",
    }


__all__ = ["check_database"]
