"""User-scoped persistence for todos, schedule items, assignments and quick tasks."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from study_planner.models.assignment import Assignment
from study_planner.models.quick_task import QuickTask
from study_planner.models.schedule_item import ScheduleItem
from study_planner.models.todo import Todo
from study_planner.models.user import User
from study_planner.schemas.assignment import AssignmentRecord
from study_planner.schemas.auth import UserUpsert
from study_planner.schemas.quick_task import QuickTaskRecord
from study_planner.schemas.schedule import ScheduleItemRecord
from study_planner.schemas.todo import TodoRecord

logger = logging.getLogger(__name__)

# Fields a client may never change through an update
IMMUTABLE_FIELDS = {"id", "user_id"}


class StorageUnavailableError(Exception):
    """The database could not complete an operation."""

    def __init__(self, action: str):
        super().__init__(f"Failed to {action}")
        self.action = action


class DatabaseStorage:
    """Store for user-owned records.

    Every per-item method filters on both the record id and the owner's user
    id. A record owned by someone else is reported exactly like a missing one.
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _guard(self, action: str) -> Iterator[None]:
        """Roll back and translate driver errors into StorageUnavailableError."""
        try:
            yield
        except IntegrityError:
            self.db.rollback()
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception(f"Database error while trying to {action}")
            raise StorageUnavailableError(action) from e

    # --- Generic scoped operations ---

    def _list(self, model: Any, user_id: str, action: str) -> list:
        with self._guard(action):
            return self.db.query(model).filter(model.user_id == user_id).all()

    def _get(self, model: Any, record_id: str, user_id: str, action: str) -> Any | None:
        with self._guard(action):
            return (
                self.db.query(model)
                .filter(model.id == record_id, model.user_id == user_id)
                .first()
            )

    def _create(self, model: Any, record: BaseModel, action: str) -> Any:
        with self._guard(action):
            row = model(**record.model_dump())
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
            return row

    def _update(
        self, model: Any, record_id: str, user_id: str, updates: dict[str, Any], action: str
    ) -> Any | None:
        forbidden = IMMUTABLE_FIELDS.intersection(updates)
        if forbidden:
            raise ValueError(f"Cannot update {', '.join(sorted(forbidden))}")

        with self._guard(action):
            row = (
                self.db.query(model)
                .filter(model.id == record_id, model.user_id == user_id)
                .first()
            )
            if row is None:
                return None
            if not updates:
                return row

            for field, value in updates.items():
                setattr(row, field, value)
            self.db.commit()
            self.db.refresh(row)
            return row

    def _delete(self, model: Any, record_id: str, user_id: str, action: str) -> bool:
        with self._guard(action):
            deleted = (
                self.db.query(model)
                .filter(model.id == record_id, model.user_id == user_id)
                .delete(synchronize_session="fetch")
            )
            self.db.commit()
            return deleted > 0

    # --- Users ---

    def get_user(self, user_id: str) -> User | None:
        with self._guard("fetch user"):
            return self.db.get(User, user_id)

    def upsert_user(self, data: UserUpsert) -> User:
        """Insert the user, or overwrite its profile fields if it already exists.

        If a concurrent first login inserts the same id between our lookup and
        commit, the write is retried once as an update. Any other integrity
        error (a taken email) propagates.
        """
        try:
            with self._guard("save user"):
                return self._save_user(data)
        except IntegrityError:
            with self._guard("save user"):
                if self.db.get(User, data.id) is None:
                    raise
                logger.info(f"User {data.id} already exists, retrying save as an update")
                return self._save_user(data)

    def _save_user(self, data: UserUpsert) -> User:
        now = datetime.now(UTC)
        user = self.db.get(User, data.id)
        if user is None:
            user = User(id=data.id, updated_at=now)
            self.db.add(user)
        else:
            user.updated_at = now

        user.email = data.email
        user.first_name = data.first_name
        user.last_name = data.last_name
        user.profile_image_url = data.profile_image_url

        self.db.commit()
        self.db.refresh(user)
        return user

    # --- Todos ---

    def get_todos(self, user_id: str) -> list[Todo]:
        return self._list(Todo, user_id, "fetch todos")

    def get_todo(self, todo_id: str, user_id: str) -> Todo | None:
        return self._get(Todo, todo_id, user_id, "fetch todo")

    def create_todo(self, record: TodoRecord) -> Todo:
        return self._create(Todo, record, "create todo")

    def update_todo(self, todo_id: str, user_id: str, updates: dict[str, Any]) -> Todo | None:
        return self._update(Todo, todo_id, user_id, updates, "update todo")

    def delete_todo(self, todo_id: str, user_id: str) -> bool:
        return self._delete(Todo, todo_id, user_id, "delete todo")

    # --- Schedule items ---

    def get_schedule_items(self, user_id: str) -> list[ScheduleItem]:
        return self._list(ScheduleItem, user_id, "fetch schedule")

    def get_schedule_item(self, item_id: str, user_id: str) -> ScheduleItem | None:
        return self._get(ScheduleItem, item_id, user_id, "fetch schedule item")

    def create_schedule_item(self, record: ScheduleItemRecord) -> ScheduleItem:
        return self._create(ScheduleItem, record, "create schedule item")

    def update_schedule_item(
        self, item_id: str, user_id: str, updates: dict[str, Any]
    ) -> ScheduleItem | None:
        return self._update(ScheduleItem, item_id, user_id, updates, "update schedule item")

    def delete_schedule_item(self, item_id: str, user_id: str) -> bool:
        return self._delete(ScheduleItem, item_id, user_id, "delete schedule item")

    # --- Assignments ---

    def get_assignments(self, user_id: str) -> list[Assignment]:
        return self._list(Assignment, user_id, "fetch assignments")

    def get_assignment(self, assignment_id: str, user_id: str) -> Assignment | None:
        return self._get(Assignment, assignment_id, user_id, "fetch assignment")

    def create_assignment(self, record: AssignmentRecord) -> Assignment:
        return self._create(Assignment, record, "create assignment")

    def update_assignment(
        self, assignment_id: str, user_id: str, updates: dict[str, Any]
    ) -> Assignment | None:
        return self._update(Assignment, assignment_id, user_id, updates, "update assignment")

    def delete_assignment(self, assignment_id: str, user_id: str) -> bool:
        return self._delete(Assignment, assignment_id, user_id, "delete assignment")

    # --- Quick tasks ---

    def get_quick_tasks(self, user_id: str) -> list[QuickTask]:
        return self._list(QuickTask, user_id, "fetch quick tasks")

    def get_quick_task(self, task_id: str, user_id: str) -> QuickTask | None:
        return self._get(QuickTask, task_id, user_id, "fetch quick task")

    def create_quick_task(self, record: QuickTaskRecord) -> QuickTask:
        return self._create(QuickTask, record, "create quick task")

    def update_quick_task(
        self, task_id: str, user_id: str, updates: dict[str, Any]
    ) -> QuickTask | None:
        return self._update(QuickTask, task_id, user_id, updates, "update quick task")

    def delete_quick_task(self, task_id: str, user_id: str) -> bool:
        return self._delete(QuickTask, task_id, user_id, "delete quick task")
