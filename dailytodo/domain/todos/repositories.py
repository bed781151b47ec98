# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date, datetime
from typing import Any, Protocol

from .entities import Todo


class TodoRepository(Protocol):
    def add(self, todo: Todo) -> Todo: ...
    def get(self, todo_id: int, user_id: int) -> Todo | None: ...
    def update(self, todo_id: int, user_id: int, changes: Mapping[str, Any]) -> bool: ...
    def delete(self, todo_id: int, user_id: int) -> bool: ...
    def list_by_day(self, user_id: int, day: date | datetime) -> Sequence[Todo]: ...
    def list_by_range(
        self, user_id: int, start: date | datetime, end: date | datetime
    ) -> Sequence[Todo]: ...
    def list_by_user(self, user_id: int) -> Sequence[Todo]: ...
