# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from dailytodo.domain.exceptions import InvariantViolation
from dailytodo.domain.todos.entities import Todo
from dailytodo.domain.todos.repositories import TodoRepository
from dailytodo.shared.errors import ValidationError


class CreateTodoUseCase:
    def __init__(self, *, todos: TodoRepository) -> None:
        self._todos = todos

    def execute(
        self,
        user_id: int,
        title: str,
        description: str | None = None,
        due_date: datetime | None = None,
    ) -> Todo:
        now = datetime.now()
        try:
            todo = Todo(
                id=0,
                user_id=user_id,
                title=title,
                description=description or None,
                completed=False,
                due_date=due_date or now,
                created_at=now,
                updated_at=now,
            )
        except InvariantViolation as exc:
            raise ValidationError(context={"fields": [exc.field], "message": str(exc)}) from exc
        return self._todos.add(todo)
