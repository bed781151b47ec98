from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from dailytodo.application.use_cases.todos.create_todo import CreateTodoUseCase
from dailytodo.application.use_cases.todos.delete_todo import DeleteTodoUseCase
from dailytodo.application.use_cases.todos.get_todo import GetTodoUseCase
from dailytodo.application.use_cases.todos.list_todos import ListTodosUseCase, TodoHistoryUseCase
from dailytodo.application.use_cases.todos.toggle_todo import ToggleTodoUseCase
from dailytodo.application.use_cases.todos.update_todo import UpdateTodoUseCase
from dailytodo.domain.todos.exceptions import TodoNotFoundError
from dailytodo.shared.errors import ValidationError

from fakes import InMemoryTodoRepository

ALICE = 1
BOB = 2


@pytest.fixture()
def todos() -> InMemoryTodoRepository:
    return InMemoryTodoRepository()


def test_create_defaults_due_date_to_now(todos: InMemoryTodoRepository) -> None:
    before = datetime.now()
    todo = CreateTodoUseCase(todos=todos).execute(ALICE, "Buy milk")

    assert todo.completed is False
    assert before <= todo.due_date <= datetime.now()


def test_create_rejects_invalid_title(todos: InMemoryTodoRepository) -> None:
    with pytest.raises(ValidationError) as exc_info:
        CreateTodoUseCase(todos=todos).execute(ALICE, "x" * 501)

    assert exc_info.value.context["fields"] == ["title"]


def test_list_by_day_and_all(todos: InMemoryTodoRepository) -> None:
    create = CreateTodoUseCase(todos=todos)
    create.execute(ALICE, "Today", due_date=datetime(2024, 1, 15, 8, 0))
    create.execute(ALICE, "Late today", due_date=datetime(2024, 1, 15, 23, 59, 59, 999_000))
    create.execute(ALICE, "Tomorrow", due_date=datetime(2024, 1, 16, 0, 0))
    create.execute(BOB, "Not mine", due_date=datetime(2024, 1, 15, 9, 0))

    listing = ListTodosUseCase(todos=todos)

    assert [t.title for t in listing.execute(ALICE, date(2024, 1, 15))] == ["Today", "Late today"]
    assert len(listing.execute(ALICE)) == 3


def test_history_orders_by_due_date(todos: InMemoryTodoRepository) -> None:
    create = CreateTodoUseCase(todos=todos)
    create.execute(ALICE, "second", due_date=datetime(2024, 1, 20, 9, 0))
    create.execute(ALICE, "first", due_date=datetime(2024, 1, 2, 9, 0))
    create.execute(ALICE, "outside", due_date=datetime(2024, 2, 1, 0, 0))

    history = TodoHistoryUseCase(todos=todos).execute(ALICE, date(2024, 1, 1), date(2024, 1, 31))

    assert [t.title for t in history] == ["first", "second"]


def test_toggle_flips_and_flips_back(todos: InMemoryTodoRepository) -> None:
    todo = CreateTodoUseCase(todos=todos).execute(ALICE, "Buy milk")
    toggle = ToggleTodoUseCase(todos=todos)

    assert toggle.execute(ALICE, todo.id).completed is True
    assert toggle.execute(ALICE, todo.id).completed is False


def test_update_only_touches_given_fields(todos: InMemoryTodoRepository) -> None:
    todo = CreateTodoUseCase(todos=todos).execute(ALICE, "Buy milk", "2 litres")
    ToggleTodoUseCase(todos=todos).execute(ALICE, todo.id)

    updated = UpdateTodoUseCase(todos=todos).execute(ALICE, todo.id, {"title": "Buy oat milk"})

    assert updated.title == "Buy oat milk"
    assert updated.description == "2 litres"
    assert updated.completed is True


def test_update_moves_due_date(todos: InMemoryTodoRepository) -> None:
    todo = CreateTodoUseCase(todos=todos).execute(ALICE, "Buy milk")
    new_due = todo.due_date + timedelta(days=1)

    updated = UpdateTodoUseCase(todos=todos).execute(ALICE, todo.id, {"due_date": new_due})

    assert updated.due_date == new_due


@pytest.mark.parametrize("changes", [{"title": ""}, {"description": "d" * 2001}, {"user_id": 2}])
def test_update_rejects_invalid_changes(todos: InMemoryTodoRepository, changes: dict) -> None:
    todo = CreateTodoUseCase(todos=todos).execute(ALICE, "Buy milk")

    with pytest.raises(ValidationError):
        UpdateTodoUseCase(todos=todos).execute(ALICE, todo.id, changes)

    assert todos.get(todo.id, ALICE).title == "Buy milk"


def test_other_users_todo_is_not_found(todos: InMemoryTodoRepository) -> None:
    todo = CreateTodoUseCase(todos=todos).execute(ALICE, "Buy milk")

    with pytest.raises(TodoNotFoundError):
        GetTodoUseCase(todos=todos).execute(BOB, todo.id)
    with pytest.raises(TodoNotFoundError):
        ToggleTodoUseCase(todos=todos).execute(BOB, todo.id)
    with pytest.raises(TodoNotFoundError):
        UpdateTodoUseCase(todos=todos).execute(BOB, todo.id, {"completed": True})
    with pytest.raises(TodoNotFoundError):
        DeleteTodoUseCase(todos=todos).execute(BOB, todo.id)

    assert todos.get(todo.id, ALICE).completed is False


def test_delete_then_get_is_not_found(todos: InMemoryTodoRepository) -> None:
    todo = CreateTodoUseCase(todos=todos).execute(ALICE, "Buy milk")

    DeleteTodoUseCase(todos=todos).execute(ALICE, todo.id)

    with pytest.raises(TodoNotFoundError):
        GetTodoUseCase(todos=todos).execute(ALICE, todo.id)
    with pytest.raises(TodoNotFoundError):
        DeleteTodoUseCase(todos=todos).execute(ALICE, todo.id)
