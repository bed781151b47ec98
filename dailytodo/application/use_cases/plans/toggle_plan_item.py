# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dailytodo.domain.plans.entities import PlanItem
from dailytodo.domain.plans.exceptions import PlanItemNotFoundError
from dailytodo.domain.plans.repositories import PlanItemRepository


class TogglePlanItemUseCase:
    def __init__(self, *, plans: PlanItemRepository) -> None:
        self._plans = plans

    def execute(self, user_id: int, item_id: int) -> PlanItem:
        item = self._plans.get(item_id, user_id)
        if item is None:
            raise PlanItemNotFoundError(item_id)

        self._plans.update(item_id, user_id, {"completed": not item.completed})

        toggled = self._plans.get(item_id, user_id)
        if toggled is None:
            raise PlanItemNotFoundError(item_id)
        return toggled
