# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dailytodo.domain.todos.exceptions import TodoNotFoundError
from dailytodo.domain.todos.repositories import TodoRepository


class DeleteTodoUseCase:
    def __init__(self, *, todos: TodoRepository) -> None:
        self._todos = todos

    def execute(self, user_id: int, todo_id: int) -> None:
        if not self._todos.delete(todo_id, user_id):
            raise TodoNotFoundError(todo_id)
