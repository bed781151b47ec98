# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from dailytodo.domain.users.entities import Role
from dailytodo.domain.users.entities import User as DomainUser
from dailytodo.domain.users.exceptions import UserAlreadyExistsError
from dailytodo.domain.users.repositories import UserRepository
from dailytodo.infrastructure.db.models import User
from dailytodo.infrastructure.unit_of_work import unit_of_work_scope


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        name=row.name,
        email=row.email,
        role="admin" if row.role == "admin" else "user",
        created_at=row.created_at,
        updated_at=row.updated_at,
        last_signed_in=row.last_signed_in,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory, "users.find_by_username") as session:
            row = session.query(User).filter(User.username == username).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory, "users.find_by_id") as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        with unit_of_work_scope(self._session_factory, "users.add") as session:
            row = User(
                username=user.username,
                password_hash=user.password_hash,
                name=user.name,
                email=user.email,
                role=user.role,
                created_at=user.created_at,
                updated_at=user.updated_at,
                last_signed_in=user.last_signed_in,
            )
            session.add(row)
            try:
                session.flush()
            except IntegrityError as exc:
                # lost a race with a concurrent registration of the same name
                raise UserAlreadyExistsError() from exc
            session.refresh(row)
            return _to_domain(row)

    def update_last_signed_in(self, user_id: int, when: datetime) -> None:
        with unit_of_work_scope(self._session_factory, "users.update_last_signed_in") as session:
            row = session.get(User, user_id)
            if row is not None:
                row.last_signed_in = when

    def set_role(self, user_id: int, role: Role) -> None:
        with unit_of_work_scope(self._session_factory, "users.set_role") as session:
            row = session.get(User, user_id)
            if row is not None:
                row.role = role


__all__ = ["SqlAlchemyUserRepository"]
