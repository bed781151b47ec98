from __future__ import annotations

import pytest
from sqlalchemy import inspect

from dailytodo.infrastructure.db.dialects import Dialect
from dailytodo.infrastructure.db.session import Database
from dailytodo.shared.config.settings import DatabaseConfig
from dailytodo.shared.errors import StoreUnavailableError


def _config(url: str, dialect: str | None = None) -> DatabaseConfig:
    return DatabaseConfig(url=url, dialect=dialect)


def test_missing_url_leaves_store_unavailable() -> None:
    db = Database(_config(""))

    assert db.connect() is False
    assert db.is_connected is False
    with pytest.raises(StoreUnavailableError) as exc_info:
        db.session()
    assert exc_info.value.to_dict() == {
        "error": "store_unavailable",
        "context": {"operation": "connect"},
    }
    assert db.check() is False


def test_migrate_on_unavailable_store_raises() -> None:
    with pytest.raises(StoreUnavailableError):
        Database(_config("")).migrate()


def test_unreachable_mysql_is_reported_as_unavailable() -> None:
    db = Database(_config("mysql://user:pw@127.0.0.1:1/todos"))

    assert db.dialect is Dialect.MYSQL
    with pytest.raises(StoreUnavailableError):
        db.migrate()
    assert db.check() is False
    db.dispose()


def test_in_memory_sqlite_is_shared_across_sessions() -> None:
    db = Database(_config(":memory:"))
    db.migrate()

    tables = set(inspect(db.engine).get_table_names())

    assert {"users", "todos", "plan_items"} <= tables
    assert db.check() is True
    db.dispose()


def test_migrate_is_idempotent(tmp_path) -> None:
    db = Database(_config(f"file:{tmp_path / 'app.db'}"))

    db.migrate()
    db.migrate()

    assert db.dialect is Dialect.SQLITE
    assert db.check() is True
    db.dispose()


def test_connect_is_idempotent(tmp_path) -> None:
    db = Database(_config(str(tmp_path / "app.db")))

    assert db.connect() is True
    engine = db.engine
    assert db.connect() is True
    assert db.engine is engine
    db.dispose()


def test_mysql_timestamps_keep_milliseconds() -> None:
    from sqlalchemy.dialects import mysql
    from sqlalchemy.schema import CreateTable

    from dailytodo.infrastructure.db.models import PlanItem, Todo

    todos_ddl = str(CreateTable(Todo.__table__).compile(dialect=mysql.dialect()))
    plans_ddl = str(CreateTable(PlanItem.__table__).compile(dialect=mysql.dialect()))

    assert "due_date DATETIME(3)" in todos_ddl
    assert "period_start DATETIME(3)" in plans_ddl
