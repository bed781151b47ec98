# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dailytodo.domain.exceptions import InvariantViolation
from dailytodo.domain.todos.entities import UPDATABLE_FIELDS, Todo, check_text
from dailytodo.domain.todos.exceptions import TodoNotFoundError
from dailytodo.domain.todos.repositories import TodoRepository
from dailytodo.shared.errors import ValidationError


class UpdateTodoUseCase:
    """Applies only the given fields; completion changes only when ``completed`` is passed."""

    def __init__(self, *, todos: TodoRepository) -> None:
        self._todos = todos

    def execute(self, user_id: int, todo_id: int, changes: Mapping[str, Any]) -> Todo:
        current = self._todos.get(todo_id, user_id)
        if current is None:
            raise TodoNotFoundError(todo_id)

        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(context={"fields": sorted(unknown)})
        try:
            check_text(
                changes.get("title", current.title),
                changes.get("description", current.description),
            )
        except InvariantViolation as exc:
            raise ValidationError(context={"fields": [exc.field], "message": str(exc)}) from exc

        if changes:
            self._todos.update(todo_id, user_id, changes)

        # may be gone already if a delete raced this update
        updated = self._todos.get(todo_id, user_id)
        if updated is None:
            raise TodoNotFoundError(todo_id)
        return updated
