# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any, Protocol

from dailytodo.domain.windows import PeriodType

from .entities import PlanItem


class PlanItemRepository(Protocol):
    def add(self, item: PlanItem) -> PlanItem: ...
    def get(self, item_id: int, user_id: int) -> PlanItem | None: ...
    def update(self, item_id: int, user_id: int, changes: Mapping[str, Any]) -> bool: ...
    def delete(self, item_id: int, user_id: int) -> bool: ...
    def list_by_period(
        self, user_id: int, period_type: PeriodType, period_start: datetime
    ) -> Sequence[PlanItem]: ...
