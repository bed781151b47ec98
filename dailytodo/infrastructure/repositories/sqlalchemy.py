# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from datetime import date, datetime
from typing import Any

from sqlalchemy.orm import Session

from dailytodo.domain.plans.entities import PlanItem as DomainPlanItem
from dailytodo.domain.plans.repositories import PlanItemRepository
from dailytodo.domain.todos.entities import UPDATABLE_FIELDS
from dailytodo.domain.todos.entities import Todo as DomainTodo
from dailytodo.domain.todos.repositories import TodoRepository
from dailytodo.domain.windows import DateWindow, PeriodType, day_window, range_window
from dailytodo.infrastructure.db.models import PlanItem, Todo
from dailytodo.infrastructure.unit_of_work import unit_of_work_scope

_PLAN_UPDATABLE_FIELDS = frozenset({"title", "description", "completed"})
# widest signed 64-bit key any supported dialect can hold
_MAX_ID = 2**63 - 1


def _todo_to_domain(row: Todo) -> DomainTodo:
    return DomainTodo(
        id=row.id,
        user_id=row.user_id,
        title=row.title,
        description=row.description,
        completed=bool(row.completed),
        due_date=row.due_date,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _plan_to_domain(row: PlanItem) -> DomainPlanItem:
    return DomainPlanItem(
        id=row.id,
        user_id=row.user_id,
        period_type=row.period_type,  # type: ignore[arg-type]
        period_start=row.period_start,
        title=row.title,
        description=row.description,
        completed=bool(row.completed),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _apply(row: Any, changes: Mapping[str, Any], allowed: frozenset[str]) -> None:
    for field, value in changes.items():
        if field not in allowed:
            raise ValueError(f"field {field!r} cannot be updated")
        setattr(row, field, value)


class SqlAlchemyTodoRepository(TodoRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def add(self, todo: DomainTodo) -> DomainTodo:
        with unit_of_work_scope(self._session_factory, "todos.add") as session:
            row = Todo(
                user_id=todo.user_id,
                title=todo.title,
                description=todo.description,
                completed=todo.completed,
                due_date=todo.due_date,
                created_at=todo.created_at,
                updated_at=todo.updated_at,
            )
            session.add(row)
            session.flush()
            session.refresh(row)
            return _todo_to_domain(row)

    def _owned(self, session: Session, todo_id: int, user_id: int) -> Todo | None:
        if not 0 < todo_id <= _MAX_ID:
            return None
        return (
            session.query(Todo)
            .filter(Todo.id == todo_id, Todo.user_id == user_id)
            .first()
        )

    def get(self, todo_id: int, user_id: int) -> DomainTodo | None:
        with unit_of_work_scope(self._session_factory, "todos.get") as session:
            row = self._owned(session, todo_id, user_id)
            return _todo_to_domain(row) if row else None

    def update(self, todo_id: int, user_id: int, changes: Mapping[str, Any]) -> bool:
        with unit_of_work_scope(self._session_factory, "todos.update") as session:
            row = self._owned(session, todo_id, user_id)
            if row is None:
                return False
            _apply(row, changes, UPDATABLE_FIELDS)
            return True

    def delete(self, todo_id: int, user_id: int) -> bool:
        with unit_of_work_scope(self._session_factory, "todos.delete") as session:
            row = self._owned(session, todo_id, user_id)
            if row is None:
                return False
            session.delete(row)
            return True

    def _list_in_window(
        self, user_id: int, window: DateWindow, order_by: tuple[Any, ...], operation: str
    ) -> list[DomainTodo]:
        with unit_of_work_scope(self._session_factory, operation) as session:
            rows = (
                session.query(Todo)
                .filter(
                    Todo.user_id == user_id,
                    Todo.due_date >= window.start,
                    Todo.due_date < window.upper_exclusive,
                )
                .order_by(*order_by, Todo.id.asc())
                .all()
            )
            return [_todo_to_domain(row) for row in rows]

    def list_by_day(self, user_id: int, day: date | datetime) -> Sequence[DomainTodo]:
        return self._list_in_window(
            user_id, day_window(day), (Todo.created_at.asc(),), "todos.list_by_day"
        )

    def list_by_range(
        self, user_id: int, start: date | datetime, end: date | datetime
    ) -> Sequence[DomainTodo]:
        return self._list_in_window(
            user_id,
            range_window(start, end),
            (Todo.due_date.asc(), Todo.created_at.asc()),
            "todos.list_by_range",
        )

    def list_by_user(self, user_id: int) -> Sequence[DomainTodo]:
        with unit_of_work_scope(self._session_factory, "todos.list_by_user") as session:
            rows = (
                session.query(Todo)
                .filter(Todo.user_id == user_id)
                .order_by(Todo.created_at.asc(), Todo.id.asc())
                .all()
            )
            return [_todo_to_domain(row) for row in rows]


class SqlAlchemyPlanItemRepository(PlanItemRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def add(self, item: DomainPlanItem) -> DomainPlanItem:
        with unit_of_work_scope(self._session_factory, "plans.add") as session:
            row = PlanItem(
                user_id=item.user_id,
                period_type=item.period_type,
                period_start=item.period_start,
                title=item.title,
                description=item.description,
                completed=item.completed,
                created_at=item.created_at,
                updated_at=item.updated_at,
            )
            session.add(row)
            session.flush()
            session.refresh(row)
            return _plan_to_domain(row)

    def _owned(self, session: Session, item_id: int, user_id: int) -> PlanItem | None:
        if not 0 < item_id <= _MAX_ID:
            return None
        return (
            session.query(PlanItem)
            .filter(PlanItem.id == item_id, PlanItem.user_id == user_id)
            .first()
        )

    def get(self, item_id: int, user_id: int) -> DomainPlanItem | None:
        with unit_of_work_scope(self._session_factory, "plans.get") as session:
            row = self._owned(session, item_id, user_id)
            return _plan_to_domain(row) if row else None

    def update(self, item_id: int, user_id: int, changes: Mapping[str, Any]) -> bool:
        with unit_of_work_scope(self._session_factory, "plans.update") as session:
            row = self._owned(session, item_id, user_id)
            if row is None:
                return False
            _apply(row, changes, _PLAN_UPDATABLE_FIELDS)
            return True

    def delete(self, item_id: int, user_id: int) -> bool:
        with unit_of_work_scope(self._session_factory, "plans.delete") as session:
            row = self._owned(session, item_id, user_id)
            if row is None:
                return False
            session.delete(row)
            return True

    def list_by_period(
        self, user_id: int, period_type: PeriodType, period_start: datetime
    ) -> Sequence[DomainPlanItem]:
        with unit_of_work_scope(self._session_factory, "plans.list_by_period") as session:
            rows = (
                session.query(PlanItem)
                .filter(
                    PlanItem.user_id == user_id,
                    PlanItem.period_type == period_type,
                    PlanItem.period_start == period_start,
                )
                .order_by(PlanItem.created_at.asc(), PlanItem.id.asc())
                .all()
            )
            return [_plan_to_domain(row) for row in rows]


__all__ = ["SqlAlchemyPlanItemRepository", "SqlAlchemyTodoRepository"]
