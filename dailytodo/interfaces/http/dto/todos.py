# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from dailytodo.domain.todos.entities import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH

from .common import CamelModel, LocalDateTime


class CreateTodoRequestDTO(CamelModel):
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    due_date: LocalDateTime = None


class UpdateTodoRequestDTO(CamelModel):
    """Partial update; only keys present in the body are applied."""

    title: str | None = Field(default=None, min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    completed: bool | None = None
    due_date: LocalDateTime = None

    @field_validator("title", "completed")
    @classmethod
    def _not_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("may be omitted but not null")
        return value

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class ListTodosQueryDTO(CamelModel):
    date: LocalDateTime = None


class TodoHistoryQueryDTO(CamelModel):
    start_date: LocalDateTime
    end_date: LocalDateTime

    @field_validator("start_date", "end_date")
    @classmethod
    def _required(cls, value: datetime | None) -> datetime:
        if value is None:
            raise ValueError("date is required")
        return value


class TodoDTO(CamelModel):
    id: int
    user_id: int
    title: str
    description: str | None
    completed: bool
    due_date: datetime | None
    created_at: datetime
    updated_at: datetime
