# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import InvariantViolation, InvariantViolationError
from .plans.entities import PlanItem
from .todos.entities import Todo
from .users.entities import AuthenticatedUser, User

__all__ = [
    "AuthenticatedUser",
    "InvariantViolation",
    "InvariantViolationError",
    "PlanItem",
    "Todo",
    "User",
]
