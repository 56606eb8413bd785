"""Field types and base classes shared by the entity schemas."""

import re
from datetime import date
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    StringConstraints,
    model_validator,
)

TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _check_time_of_day(value: str) -> str:
    match = TIME_PATTERN.match(value)
    if not match or int(match.group(1)) > 23 or int(match.group(2)) > 59:
        raise ValueError("time must look like H:MM or HH:MM (24-hour clock)")
    return value


def _check_due_date(value: str) -> str:
    if not DATE_PATTERN.match(value):
        raise ValueError("due date must be formatted YYYY-MM-DD")
    try:
        date.fromisoformat(value)
    except ValueError:
        raise ValueError(f"'{value}' is not a valid calendar date") from None
    return value


Title = Annotated[StrictStr, StringConstraints(strip_whitespace=True, min_length=1, max_length=500)]
DayOfWeek = Annotated[StrictInt, Field(ge=0, le=6)]
TimeOfDay = Annotated[StrictStr, AfterValidator(_check_time_of_day)]
DueDate = Annotated[StrictStr, AfterValidator(_check_due_date)]


class InputSchema(BaseModel):
    """Base for client-supplied payloads. Unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid", use_enum_values=True, validate_default=True)


class PartialUpdate(InputSchema):
    """Base for partial updates: any subset of fields, but never explicit nulls."""

    @model_validator(mode="after")
    def reject_nulls(self) -> Any:
        nulls = sorted(name for name in self.model_fields_set if getattr(self, name) is None)
        if nulls:
            raise ValueError(f"fields cannot be null: {', '.join(nulls)}")
        return self
