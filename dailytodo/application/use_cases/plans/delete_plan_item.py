# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dailytodo.domain.plans.exceptions import PlanItemNotFoundError
from dailytodo.domain.plans.repositories import PlanItemRepository


class DeletePlanItemUseCase:
    def __init__(self, *, plans: PlanItemRepository) -> None:
        self._plans = plans

    def execute(self, user_id: int, item_id: int) -> None:
        if not self._plans.delete(item_id, user_id):
            raise PlanItemNotFoundError(item_id)
