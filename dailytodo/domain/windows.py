# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Date windows used to bucket todos by day and plan items by week or month.

Everything here works on naive local-time datetimes and is a pure function of
its arguments (the only implicit input is "now" when no anchor is given).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Literal

PeriodType = Literal["week", "month"]
PERIOD_TYPES: tuple[PeriodType, ...] = ("week", "month")

_END_OF_DAY = time(23, 59, 59, 999_000)
_ONE_MS = timedelta(milliseconds=1)


@dataclass(slots=True, frozen=True)
class DateWindow:
    """Inclusive ``[start, end]`` window with millisecond resolution."""

    start: datetime
    end: datetime

    @property
    def upper_exclusive(self) -> datetime:
        # end is 23:59:59.999, so this is the next midnight
        return self.end + _ONE_MS

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment < self.upper_exclusive


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def start_of_day(value: date | datetime) -> datetime:
    return datetime.combine(_as_date(value), time.min)


def end_of_day(value: date | datetime) -> datetime:
    return datetime.combine(_as_date(value), _END_OF_DAY)


def day_window(reference: date | datetime) -> DateWindow:
    return DateWindow(start=start_of_day(reference), end=end_of_day(reference))


def range_window(start: date | datetime, end: date | datetime) -> DateWindow:
    return DateWindow(start=start_of_day(start), end=end_of_day(end))


def week_start(anchor: date | datetime | None = None) -> datetime:
    day = _as_date(anchor or datetime.now())
    # weekday(): Monday == 0 ... Sunday == 6
    return start_of_day(day - timedelta(days=day.weekday()))


def month_start(anchor: date | datetime | None = None) -> datetime:
    day = _as_date(anchor or datetime.now())
    return start_of_day(day.replace(day=1))


def period_start(period_type: PeriodType, anchor: date | datetime | None = None) -> datetime:
    if period_type == "week":
        return week_start(anchor)
    if period_type == "month":
        return month_start(anchor)
    raise ValueError(f"unknown period type: {period_type!r}")


def is_period_start(period_type: PeriodType, moment: datetime) -> bool:
    return period_start(period_type, moment) == moment


__all__ = [
    "DateWindow",
    "PERIOD_TYPES",
    "PeriodType",
    "day_window",
    "end_of_day",
    "is_period_start",
    "month_start",
    "period_start",
    "range_window",
    "start_of_day",
    "week_start",
]
