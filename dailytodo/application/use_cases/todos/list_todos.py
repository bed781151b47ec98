# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime

from dailytodo.domain.todos.entities import Todo
from dailytodo.domain.todos.repositories import TodoRepository


class ListTodosUseCase:
    """Todos due on one day, or every todo of the user when no day is given."""

    def __init__(self, *, todos: TodoRepository) -> None:
        self._todos = todos

    def execute(self, user_id: int, day: date | datetime | None = None) -> Sequence[Todo]:
        if day is None:
            return self._todos.list_by_user(user_id)
        return self._todos.list_by_day(user_id, day)


class TodoHistoryUseCase:
    def __init__(self, *, todos: TodoRepository) -> None:
        self._todos = todos

    def execute(
        self, user_id: int, start: date | datetime, end: date | datetime
    ) -> Sequence[Todo]:
        return self._todos.list_by_range(user_id, start, end)
