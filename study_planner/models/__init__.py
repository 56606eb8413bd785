"""SQLAlchemy models."""

from study_planner.models.assignment import Assignment
from study_planner.models.quick_task import QuickTask
from study_planner.models.schedule_item import ScheduleItem
from study_planner.models.session import LoginSession
from study_planner.models.todo import Todo
from study_planner.models.user import User

__all__ = [
    "User",
    "Todo",
    "ScheduleItem",
    "Assignment",
    "QuickTask",
    "LoginSession",
]
