# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from dailytodo.shared.errors.base import DomainError


class PlanItemNotFoundError(DomainError):
    code = "plan_item_not_found"
    status = HTTPStatus.NOT_FOUND

    def __init__(self, item_id: int) -> None:
        super().__init__(context={"id": item_id})
