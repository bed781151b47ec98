# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from dailytodo.domain.todos.entities import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH
from dailytodo.domain.windows import PeriodType

from .common import CamelModel, LocalDateTime


class ListPlanItemsQueryDTO(CamelModel):
    type: PeriodType
    anchor: LocalDateTime = None


class CreatePlanItemRequestDTO(CamelModel):
    type: PeriodType
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    anchor: LocalDateTime = None


class PlanItemDTO(CamelModel):
    id: int
    user_id: int
    period_type: PeriodType
    period_start: datetime
    title: str
    description: str | None
    completed: bool
    created_at: datetime
    updated_at: datetime
