# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import date, datetime, time
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def parse_local_datetime(value: Any) -> datetime | None:
    """ISO-8601 date or datetime, returned naive in server-local time."""

    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str):
        parsed = datetime.fromisoformat(value.strip())
    else:
        raise ValueError("expected an ISO-8601 date or datetime string")

    try:
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone().replace(tzinfo=None)
    except OverflowError as exc:
        raise ValueError("date is out of range") from exc
    # day windows end at the next midnight, which must still be representable
    if parsed.date() >= date.max:
        raise ValueError("date is out of range")
    return parsed


LocalDateTime = Annotated[datetime | None, BeforeValidator(parse_local_datetime)]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
        from_attributes=True,
    )

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class SuccessDTO(BaseModel):
    success: bool = True


__all__ = ["CamelModel", "LocalDateTime", "SuccessDTO", "parse_local_datetime"]
