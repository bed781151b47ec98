# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import threading

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from dailytodo.shared.config.settings import DatabaseConfig
from dailytodo.shared.errors import StoreUnavailableError
from dailytodo.shared.logging import logger, sanitize_message

from .dialects import Dialect, is_memory_url, normalize_url, resolve_dialect


class Base(DeclarativeBase):
    pass


def _set_sqlite_pragmas(dbapi_conn, _):
    cur = dbapi_conn.cursor()
    try:
        cur.execute("PRAGMA journal_mode=WAL;")
        cur.execute("PRAGMA synchronous=NORMAL;")
        cur.execute("PRAGMA foreign_keys=ON;")
        cur.execute("PRAGMA busy_timeout=30000;")
    except Exception:
        logger.exception("Failed to apply SQLite PRAGMAs")
    finally:
        cur.close()


class Database:
    """Process-wide store handle.

    The dialect is resolved once. The engine is created on first use under a
    lock; when that fails the handle stays "not connected" and every session
    request raises ``StoreUnavailableError`` until a later attempt succeeds.
    """

    def __init__(self, config: DatabaseConfig) -> None:
        self._config = config
        self._lock = threading.Lock()
        self._dialect: Dialect | None = None
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None

    @property
    def dialect(self) -> Dialect:
        if self._dialect is None:
            self._dialect = resolve_dialect(self._config.url, self._config.dialect)
        return self._dialect

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    def _create_engine(self) -> Engine:
        url = normalize_url(self._config.url, self.dialect)
        kwargs: dict[str, object] = {"echo": False, "future": True, "pool_pre_ping": True}

        if self.dialect is Dialect.SQLITE:
            kwargs["connect_args"] = {
                "check_same_thread": False,
                "timeout": int(self._config.pool_timeout),
            }
            if is_memory_url(url):
                # one shared connection, otherwise every checkout sees an empty db
                kwargs["poolclass"] = StaticPool
            else:
                kwargs.update(
                    pool_size=self._config.pool_size,
                    max_overflow=self._config.max_overflow,
                    pool_timeout=self._config.pool_timeout,
                )
        else:
            kwargs.update(
                pool_size=self._config.pool_size,
                max_overflow=self._config.max_overflow,
                pool_timeout=self._config.pool_timeout,
                pool_recycle=3600,
            )

        engine = create_engine(url, **kwargs)
        if self.dialect is Dialect.SQLITE:
            event.listen(engine, "connect", _set_sqlite_pragmas)
        return engine

    def connect(self) -> bool:
        if self._engine is not None:
            return True
        with self._lock:
            if self._engine is not None:
                return True
            if not self._config.url:
                logger.warning("db: DATABASE_URL is empty, store unavailable")
                return False
            try:
                engine = self._create_engine()
            except (SQLAlchemyError, ImportError, ValueError, TypeError) as exc:
                logger.error(
                    f"db: failed to initialise {self.dialect} engine: "
                    f"{sanitize_message(str(exc))}"
                )
                return False
            self._engine = engine
            self._session_factory = sessionmaker(
                bind=engine, autoflush=False, autocommit=False, expire_on_commit=False
            )
            logger.info(f"db: {self.dialect} engine initialised")
            return True

    @property
    def engine(self) -> Engine:
        if not self.connect():
            raise StoreUnavailableError("connect")
        assert self._engine is not None
        return self._engine

    def session(self) -> Session:
        if not self.connect():
            raise StoreUnavailableError("connect")
        assert self._session_factory is not None
        return self._session_factory()

    def migrate(self) -> None:
        """Create missing tables; the same step for every dialect."""

        # registers the mapped tables on Base.metadata
        from . import models  # noqa: F401

        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as exc:
            logger.error(f"db: schema migration failed: {type(exc).__name__}")
            raise StoreUnavailableError("migrate") from exc
        logger.info(f"db: schema ensured ({self.dialect})")

    def check(self) -> bool:
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except (StoreUnavailableError, SQLAlchemyError):
            logger.warning("db: health check failed")
            return False
        return True

    def dispose(self) -> None:
        with self._lock:
            if self._engine is not None:
                self._engine.dispose()
            self._engine = None
            self._session_factory = None


__all__ = ["Base", "Database"]
