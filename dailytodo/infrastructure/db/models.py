# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import Mapped, mapped_column

from .session import Base

# MySQL DATETIME drops fractions otherwise; day windows need milliseconds
_Timestamp = DateTime().with_variant(mysql.DATETIME(fsp=3), "mysql")


def _now() -> datetime:
    # stored naive, local wall-clock time
    return datetime.now()


class User(Base):
    __tablename__ = "users"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255))
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    role: Mapped[str] = mapped_column(String(16), nullable=False, default="user", server_default="user")
    created_at: Mapped[datetime] = mapped_column(_Timestamp, nullable=False, default=_now)
    updated_at: Mapped[datetime] = mapped_column(_Timestamp, nullable=False, default=_now, onupdate=_now)
    last_signed_in: Mapped[datetime] = mapped_column(_Timestamp, nullable=False, default=_now)


class Todo(Base):
    __tablename__ = "todos"
    __table_args__ = (Index("ix_todos_user_due", "user_id", "due_date"),)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    title: Mapped[str] = mapped_column(Text)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default="0")
    due_date: Mapped[datetime | None] = mapped_column(_Timestamp, nullable=True)
    created_at: Mapped[datetime] = mapped_column(_Timestamp, nullable=False, default=_now)
    updated_at: Mapped[datetime] = mapped_column(_Timestamp, nullable=False, default=_now, onupdate=_now)


class PlanItem(Base):
    __tablename__ = "plan_items"
    __table_args__ = (
        Index("ix_plan_items_period", "user_id", "period_type", "period_start"),
    )
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    period_type: Mapped[str] = mapped_column(String(16), nullable=False)
    period_start: Mapped[datetime] = mapped_column(_Timestamp, nullable=False)
    title: Mapped[str] = mapped_column(Text)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default="0")
    created_at: Mapped[datetime] = mapped_column(_Timestamp, nullable=False, default=_now)
    updated_at: Mapped[datetime] = mapped_column(_Timestamp, nullable=False, default=_now, onupdate=_now)


__all__ = ["PlanItem", "Todo", "User"]
