# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Transactional session scope shared by the SQLAlchemy repositories."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dailytodo.shared.errors import StoreUnavailableError
from dailytodo.shared.logging import logger


@dataclass(slots=True)
class SqlAlchemyUnitOfWork(AbstractContextManager):
    """Commits on clean exit, rolls back on error, always closes.

    Driver and connection faults leave as ``StoreUnavailableError`` so callers
    above the repository layer never see SQLAlchemy exceptions.
    """

    session_factory: Callable[[], Session]
    operation: str = "query"
    _session: Session | None = None

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self._session = self.session_factory()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        assert self._session is not None
        session, self._session = self._session, None
        try:
            if exc is None:
                session.commit()
            else:
                session.rollback()
        except SQLAlchemyError as fault:
            logger.error(f"uow[{self.operation}]: finalising failed: {type(fault).__name__}")
            raise StoreUnavailableError(self.operation) from fault
        finally:
            session.close()

        if isinstance(exc, SQLAlchemyError):
            logger.error(f"uow[{self.operation}]: {type(exc).__name__}")
            raise StoreUnavailableError(self.operation) from exc

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("UnitOfWork session accessed before entering context")
        return self._session


@contextmanager
def unit_of_work_scope(
    factory: Callable[[], Session], operation: str = "query"
) -> Iterator[Session]:
    with SqlAlchemyUnitOfWork(factory, operation) as uow:
        yield uow.session


__all__ = ["SqlAlchemyUnitOfWork", "unit_of_work_scope"]
