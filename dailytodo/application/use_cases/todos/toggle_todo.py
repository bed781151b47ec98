# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dailytodo.domain.todos.entities import Todo
from dailytodo.domain.todos.exceptions import TodoNotFoundError
from dailytodo.domain.todos.repositories import TodoRepository


class ToggleTodoUseCase:
    def __init__(self, *, todos: TodoRepository) -> None:
        self._todos = todos

    def execute(self, user_id: int, todo_id: int) -> Todo:
        todo = self._todos.get(todo_id, user_id)
        if todo is None:
            raise TodoNotFoundError(todo_id)

        self._todos.update(todo_id, user_id, {"completed": not todo.completed})

        toggled = self._todos.get(todo_id, user_id)
        if toggled is None:
            raise TodoNotFoundError(todo_id)
        return toggled
