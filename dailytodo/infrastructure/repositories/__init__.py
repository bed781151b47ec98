# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .sqlalchemy import SqlAlchemyPlanItemRepository, SqlAlchemyTodoRepository
from .users import SqlAlchemyUserRepository

__all__ = [
    "SqlAlchemyPlanItemRepository",
    "SqlAlchemyTodoRepository",
    "SqlAlchemyUserRepository",
]
