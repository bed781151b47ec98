# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime

from dailytodo.domain.plans.entities import PlanItem
from dailytodo.domain.plans.repositories import PlanItemRepository
from dailytodo.domain.windows import PeriodType, period_start


class ListPlanItemsUseCase:
    """Items of the week or month containing ``anchor`` (default: now)."""

    def __init__(self, *, plans: PlanItemRepository) -> None:
        self._plans = plans

    def execute(
        self,
        user_id: int,
        period_type: PeriodType,
        anchor: date | datetime | None = None,
    ) -> Sequence[PlanItem]:
        return self._plans.list_by_period(user_id, period_type, period_start(period_type, anchor))
