"""Decoding of untrusted request payloads into store records.

Create payloads become ``*Record`` objects with the owner injected from the
authenticated caller; update payloads become a dict holding only the fields
the client sent. Unknown fields are rejected for both, so a client can never
set ``id`` or ``user_id`` itself.
"""

from enum import Enum
from typing import Any

from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from study_planner.schemas import (
    AssignmentCreate,
    AssignmentRecord,
    AssignmentUpdate,
    QuickTaskCreate,
    QuickTaskRecord,
    QuickTaskUpdate,
    ScheduleItemCreate,
    ScheduleItemRecord,
    ScheduleItemUpdate,
    TodoCreate,
    TodoRecord,
    TodoUpdate,
)

OWNER_FIELDS = ("user_id", "userId")


class ValidationFailure(Exception):
    """Raised when a payload does not match the schema for its entity kind."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EntityKind(str, Enum):
    """The user-owned record types."""

    TODO = "todo"
    SCHEDULE_ITEM = "schedule_item"
    ASSIGNMENT = "assignment"
    QUICK_TASK = "quick_task"


# kind -> (create schema, record schema, update schema)
SCHEMAS: dict[EntityKind, tuple[type[BaseModel], type[BaseModel], type[BaseModel]]] = {
    EntityKind.TODO: (TodoCreate, TodoRecord, TodoUpdate),
    EntityKind.SCHEDULE_ITEM: (ScheduleItemCreate, ScheduleItemRecord, ScheduleItemUpdate),
    EntityKind.ASSIGNMENT: (AssignmentCreate, AssignmentRecord, AssignmentUpdate),
    EntityKind.QUICK_TASK: (QuickTaskCreate, QuickTaskRecord, QuickTaskUpdate),
}


def format_errors(exc: ValidationError | RequestValidationError) -> str:
    """Collapse pydantic or request-parsing errors into one readable line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


def _require_object(payload: Any) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise ValidationFailure("Request body must be a JSON object")
    return payload


def decode_create(kind: EntityKind, payload: Any, user_id: str) -> BaseModel:
    """Validate a create payload and attach the caller as owner."""
    data = _require_object(payload)

    smuggled = [field for field in OWNER_FIELDS if field in data]
    if smuggled:
        raise ValidationFailure(f"{smuggled[0]}: owner is set by the server and cannot be sent")

    create_schema, record_schema, _ = SCHEMAS[kind]
    try:
        validated = create_schema.model_validate(data)
    except ValidationError as e:
        raise ValidationFailure(format_errors(e)) from None

    return record_schema(**validated.model_dump(), user_id=user_id)


def decode_update(kind: EntityKind, payload: Any) -> dict[str, Any]:
    """Validate a partial update and return only the fields that were sent."""
    data = _require_object(payload)
    if not data:
        raise ValidationFailure("No fields to update")

    _, _, update_schema = SCHEMAS[kind]
    try:
        validated = update_schema.model_validate(data)
    except ValidationError as e:
        raise ValidationFailure(format_errors(e)) from None

    return validated.model_dump(exclude_unset=True)
