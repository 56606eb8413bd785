"""Starter data for a user's first visit."""

import logging
from datetime import date, timedelta

from study_planner.schemas.assignment import AssignmentRecord
from study_planner.schemas.schedule import ScheduleItemRecord
from study_planner.schemas.todo import TodoRecord
from study_planner.services.storage import DatabaseStorage

logger = logging.getLogger(__name__)

# (title, completed, day_of_week, category, priority)
DEFAULT_TODOS = [
    ("Wake up at 6:30AM", False, 1, "daily", "high"),
    ("Morning Routine", False, 1, "daily", "medium"),
    ("Pack Bag", True, 1, "daily", "medium"),
    ("Check Planner", False, 1, "daily", "medium"),
    ("Attend Classes", False, 1, "daily", "high"),
    ("Take Notes", False, 1, "daily", "medium"),
    ("Lunch", False, 1, "daily", "low"),
    ("Homework", False, 1, "daily", "high"),
    ("Complete Math Worksheets", False, 1, "monthly", "high"),
    ("Study for Midterms", False, 1, "monthly", "high"),
    ("Work on English Essay", False, 1, "monthly", "medium"),
]

# (title, time, day_of_week, category, completed)
DEFAULT_SCHEDULE = [
    ("Science", "7:30", 1, "science", False),
    ("Math", "9:55", 1, "math", True),
    ("Break", "11:00", 1, "break", True),
    ("Social", "11:55", 1, "social", False),
    ("Music", "12:50", 1, "music", False),
    ("Free time", "7:30", 2, "free", False),
    ("PE", "9:55", 2, "pe", False),
    ("Break", "11:00", 2, "break", False),
    ("Biology", "11:55", 2, "biology", False),
    ("English", "12:50", 2, "english", False),
    ("Biology", "7:30", 3, "biology", False),
    ("Social", "9:55", 3, "social", False),
    ("Break", "11:00", 3, "break", False),
    ("PE", "11:55", 3, "pe", False),
    ("Math", "12:50", 3, "math", False),
    ("Science", "7:30", 4, "science", False),
    ("Math", "9:55", 4, "math", False),
    ("Break", "11:00", 4, "break", False),
    ("Social", "11:55", 4, "social", False),
    ("Biology", "12:50", 4, "biology", False),
]

# (title, days until due, category)
DEFAULT_ASSIGNMENTS = [
    ("Math Homework", 5, "math"),
    ("Science Project", 10, "science"),
    ("English Essay", 3, "english"),
]


def seed_user_data(storage: DatabaseStorage, user_id: str, today: date | None = None) -> None:
    """Give a new user a starter week of todos, classes and assignments.

    A user with any todo at all counts as already seeded, so this is a no-op
    on every visit after the first. Rows are inserted one at a time with no
    surrounding transaction: a failure part-way leaves the rows written so
    far, and since todos are written first the guard will then skip the
    missing kinds forever. Two concurrent first visits can both pass the
    guard and insert the defaults twice.
    """
    if storage.get_todos(user_id):
        return

    logger.info(f"Seeding starter data for user {user_id}")

    for title, completed, day_of_week, category, priority in DEFAULT_TODOS:
        storage.create_todo(
            TodoRecord(
                user_id=user_id,
                title=title,
                completed=completed,
                day_of_week=day_of_week,
                category=category,
                priority=priority,
            )
        )

    for title, time, day_of_week, category, completed in DEFAULT_SCHEDULE:
        storage.create_schedule_item(
            ScheduleItemRecord(
                user_id=user_id,
                title=title,
                time=time,
                day_of_week=day_of_week,
                category=category,
                completed=completed,
            )
        )

    # Due dates are relative to the day the account is first seen
    today = today or date.today()
    for title, days_until_due, category in DEFAULT_ASSIGNMENTS:
        storage.create_assignment(
            AssignmentRecord(
                user_id=user_id,
                title=title,
                due_date=(today + timedelta(days=days_until_due)).isoformat(),
                category=category,
            )
        )
