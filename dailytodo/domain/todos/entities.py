# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from dailytodo.domain.exceptions import InvariantViolation

TITLE_MAX_LENGTH = 500
DESCRIPTION_MAX_LENGTH = 2000

# Fields a caller may change through an update; completion only when given explicitly.
UPDATABLE_FIELDS = frozenset({"title", "description", "completed", "due_date"})


def check_text(title: str, description: str | None) -> None:
    if not title or len(title) > TITLE_MAX_LENGTH:
        raise InvariantViolation(
            f"title must be 1-{TITLE_MAX_LENGTH} characters", field="title"
        )
    if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
        raise InvariantViolation(
            f"description must be at most {DESCRIPTION_MAX_LENGTH} characters",
            field="description",
        )


@dataclass(slots=True, frozen=True)
class Todo:
    """A single item on a user's list; ``due_date`` ties it to a calendar day."""

    id: int
    user_id: int
    title: str
    description: str | None
    completed: bool
    due_date: datetime | None
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        check_text(self.title, self.description)
