"""Pydantic schemas for API requests and responses."""

from study_planner.schemas.assignment import (
    AssignmentCreate,
    AssignmentRecord,
    AssignmentResponse,
    AssignmentUpdate,
)
from study_planner.schemas.auth import UserResponse, UserUpsert
from study_planner.schemas.quick_task import (
    QuickTaskCreate,
    QuickTaskRecord,
    QuickTaskResponse,
    QuickTaskUpdate,
)
from study_planner.schemas.schedule import (
    ScheduleItemCreate,
    ScheduleItemRecord,
    ScheduleItemResponse,
    ScheduleItemUpdate,
)
from study_planner.schemas.todo import TodoCreate, TodoRecord, TodoResponse, TodoUpdate

__all__ = [
    "UserUpsert",
    "UserResponse",
    "TodoCreate",
    "TodoRecord",
    "TodoUpdate",
    "TodoResponse",
    "ScheduleItemCreate",
    "ScheduleItemRecord",
    "ScheduleItemUpdate",
    "ScheduleItemResponse",
    "AssignmentCreate",
    "AssignmentRecord",
    "AssignmentUpdate",
    "AssignmentResponse",
    "QuickTaskCreate",
    "QuickTaskRecord",
    "QuickTaskUpdate",
    "QuickTaskResponse",
]
