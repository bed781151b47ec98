# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from dailytodo.domain.exceptions import InvariantViolation
from dailytodo.domain.todos.entities import check_text
from dailytodo.domain.windows import PERIOD_TYPES, PeriodType, is_period_start


@dataclass(slots=True, frozen=True)
class PlanItem:
    """Weekly or monthly goal bucketed by the normalized start of its period."""

    id: int
    user_id: int
    period_type: PeriodType
    period_start: datetime
    title: str
    description: str | None
    completed: bool
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        if self.period_type not in PERIOD_TYPES:
            raise InvariantViolation("period type must be week or month", field="period_type")
        if not is_period_start(self.period_type, self.period_start):
            raise InvariantViolation(
                f"period start must be the first instant of the {self.period_type}",
                field="period_start",
            )
        check_text(self.title, self.description)
