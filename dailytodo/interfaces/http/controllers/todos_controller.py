# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from dailytodo.application.use_cases.todos.create_todo import CreateTodoUseCase
from dailytodo.application.use_cases.todos.delete_todo import DeleteTodoUseCase
from dailytodo.application.use_cases.todos.get_todo import GetTodoUseCase
from dailytodo.application.use_cases.todos.list_todos import (
    ListTodosUseCase,
    TodoHistoryUseCase,
)
from dailytodo.application.use_cases.todos.toggle_todo import ToggleTodoUseCase
from dailytodo.application.use_cases.todos.update_todo import UpdateTodoUseCase
from dailytodo.domain.todos.entities import Todo
from dailytodo.infrastructure.auth import auth_required, current_user
from dailytodo.interfaces.http.dto.common import SuccessDTO
from dailytodo.interfaces.http.dto.todos import (
    CreateTodoRequestDTO,
    ListTodosQueryDTO,
    TodoDTO,
    TodoHistoryQueryDTO,
    UpdateTodoRequestDTO,
)
from dailytodo.shared.errors.validation import raise_validation_error


def _serialize(todo: Todo) -> dict:
    return TodoDTO.model_validate(todo).to_json()


class TodosController:
    """Per-user todo CRUD; every route requires a session."""

    def __init__(
        self,
        *,
        create_use_case: CreateTodoUseCase,
        list_use_case: ListTodosUseCase,
        history_use_case: TodoHistoryUseCase,
        get_use_case: GetTodoUseCase,
        update_use_case: UpdateTodoUseCase,
        toggle_use_case: ToggleTodoUseCase,
        delete_use_case: DeleteTodoUseCase,
    ) -> None:
        self._create = create_use_case
        self._list = list_use_case
        self._history = history_use_case
        self._get = get_use_case
        self._update = update_use_case
        self._toggle = toggle_use_case
        self._delete = delete_use_case

    @auth_required
    def list(self) -> tuple[Response, int]:
        try:
            query = ListTodosQueryDTO.model_validate(request.args.to_dict())
        except ValidationError as exc:
            raise_validation_error(exc)
        todos = self._list.execute(current_user().id, query.date)
        return jsonify([_serialize(todo) for todo in todos]), 200

    @auth_required
    def history(self) -> tuple[Response, int]:
        try:
            query = TodoHistoryQueryDTO.model_validate(request.args.to_dict())
        except ValidationError as exc:
            raise_validation_error(exc)
        todos = self._history.execute(current_user().id, query.start_date, query.end_date)
        return jsonify([_serialize(todo) for todo in todos]), 200

    @auth_required
    def create(self) -> tuple[Response, int]:
        try:
            dto = CreateTodoRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)
        todo = self._create.execute(
            current_user().id, dto.title, dto.description, dto.due_date
        )
        return jsonify(_serialize(todo)), 201

    @auth_required
    def get(self, todo_id: int) -> tuple[Response, int]:
        return jsonify(_serialize(self._get.execute(current_user().id, todo_id))), 200

    @auth_required
    def update(self, todo_id: int) -> tuple[Response, int]:
        try:
            dto = UpdateTodoRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)
        todo = self._update.execute(current_user().id, todo_id, dto.changes())
        return jsonify(_serialize(todo)), 200

    @auth_required
    def toggle(self, todo_id: int) -> tuple[Response, int]:
        return jsonify(_serialize(self._toggle.execute(current_user().id, todo_id))), 200

    @auth_required
    def delete(self, todo_id: int) -> tuple[Response, int]:
        self._delete.execute(current_user().id, todo_id)
        return jsonify(SuccessDTO().model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("todos", __name__, url_prefix="/api/todos")
        bp.add_url_rule("", view_func=self.list, methods=["GET"])
        bp.add_url_rule("", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/history", view_func=self.history, methods=["GET"])
        bp.add_url_rule("/<int:todo_id>", view_func=self.get, methods=["GET"])
        bp.add_url_rule("/<int:todo_id>", view_func=self.update, methods=["PATCH"])
        bp.add_url_rule("/<int:todo_id>", view_func=self.delete, methods=["DELETE"])
        bp.add_url_rule("/<int:todo_id>/toggle", view_func=self.toggle, methods=["POST"])
        return bp
