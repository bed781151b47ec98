# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import date, datetime

from dailytodo.domain.plans.entities import PlanItem
from dailytodo.domain.plans.repositories import PlanItemRepository
from dailytodo.domain.windows import PeriodType, period_start
from dailytodo.shared.errors import ValidationError


class CreatePlanItemUseCase:
    def __init__(self, *, plans: PlanItemRepository) -> None:
        self._plans = plans

    def execute(
        self,
        user_id: int,
        period_type: PeriodType,
        title: str,
        description: str | None = None,
        anchor: date | datetime | None = None,
    ) -> PlanItem:
        now = datetime.now()
        try:
            item = PlanItem(
                id=0,
                user_id=user_id,
                period_type=period_type,
                period_start=period_start(period_type, anchor or now),
                title=title,
                description=description or None,
                completed=False,
                created_at=now,
                updated_at=now,
            )
        except ValueError as exc:
            # InvariantViolation, or an unknown period type from period_start
            field = getattr(exc, "field", None) or "type"
            raise ValidationError(context={"fields": [field], "message": str(exc)}) from exc
        return self._plans.add(item)
