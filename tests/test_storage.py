"""Tests for the user-scoped store."""

import time
from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from study_planner.schemas.assignment import AssignmentRecord, AssignmentResponse
from study_planner.schemas.auth import UserUpsert
from study_planner.schemas.quick_task import QuickTaskRecord
from study_planner.schemas.schedule import ScheduleItemRecord, ScheduleItemResponse
from study_planner.schemas.todo import TodoRecord, TodoResponse
from study_planner.services.storage import DatabaseStorage, StorageUnavailableError


def make_todo(storage, user_id="u1", **overrides):
    fields = {"title": "Read", "day_of_week": 1}
    fields.update(overrides)
    return storage.create_todo(TodoRecord(user_id=user_id, **fields))


def test_create_todo_applies_defaults(storage, user):
    """Omitted optional fields are stored with their defaults."""
    todo = make_todo(storage)

    assert todo.id
    assert todo.user_id == "u1"
    assert todo.title == "Read"
    assert todo.day_of_week == 1
    assert todo.completed is False
    assert todo.category == "other"
    assert todo.priority == "medium"


def test_create_generates_unique_ids(storage, user):
    """Every create gets a fresh identifier."""
    ids = {make_todo(storage, title=f"Todo {i}").id for i in range(5)}
    assert len(ids) == 5


def test_get_after_create_returns_equal_record(storage, user):
    """Reading back a created row gives the same data."""
    created = TodoResponse.model_validate(make_todo(storage, priority="high"))

    fetched = storage.get_todo(created.id, "u1")

    assert fetched is not None
    assert TodoResponse.model_validate(fetched) == created


def test_get_todos_only_returns_owned_rows(storage, user, other_user):
    """Listing is scoped to the owner."""
    make_todo(storage, title="Mine")
    make_todo(storage, user_id="u2", title="Theirs")

    titles = [todo.title for todo in storage.get_todos("u1")]

    assert titles == ["Mine"]


def test_get_todo_other_user_is_absent(storage, user, other_user):
    """A row owned by someone else is reported as missing."""
    todo = make_todo(storage)

    assert storage.get_todo(todo.id, "u2") is None
    assert storage.get_todo("does-not-exist", "u1") is None


def test_update_changes_only_given_field(storage, user):
    """Partial updates leave the other columns alone."""
    todo = make_todo(storage, category="math", priority="low")
    before = TodoResponse.model_validate(todo).model_dump()

    updated = storage.update_todo(todo.id, "u1", {"completed": True})

    after = TodoResponse.model_validate(updated).model_dump()
    assert after["completed"] is True
    assert {k: v for k, v in after.items() if k != "completed"} == {
        k: v for k, v in before.items() if k != "completed"
    }


def test_update_wrong_user_is_absent_and_row_unchanged(storage, user, other_user):
    """Updating another user's row does nothing."""
    todo = make_todo(storage)

    assert storage.update_todo(todo.id, "u2", {"title": "Hijacked"}) is None

    storage.db.expire_all()
    assert storage.get_todo(todo.id, "u1").title == "Read"


def test_update_with_no_fields_returns_current_row(storage, user):
    """An empty update is a no-op for an owned row."""
    todo = make_todo(storage)

    assert storage.update_todo(todo.id, "u1", {}).title == "Read"
    assert storage.update_todo(todo.id, "u2", {}) is None


def test_update_refuses_owner_and_id_changes(storage, user):
    """Ownership and identity are immutable."""
    todo = make_todo(storage)

    with pytest.raises(ValueError, match="user_id"):
        storage.update_todo(todo.id, "u1", {"user_id": "u2"})
    with pytest.raises(ValueError, match="id"):
        storage.update_todo(todo.id, "u1", {"id": "other"})


def test_delete_succeeds_once(storage, user):
    """Deleting returns True the first time and False afterwards."""
    todo_id = make_todo(storage).id

    assert storage.delete_todo(todo_id, "u1") is True
    assert storage.delete_todo(todo_id, "u1") is False
    assert storage.get_todo(todo_id, "u1") is None


def test_delete_removes_loaded_instance_from_session(storage, user):
    """A deleted row no longer lingers in the session after the delete."""
    todo = make_todo(storage)
    todo_id = todo.id

    assert storage.delete_todo(todo_id, "u1") is True

    assert todo not in storage.db
    assert storage.get_todos("u1") == []


def test_create_for_unknown_owner_rejected(storage, user):
    """Every record must belong to an existing user."""
    with pytest.raises(IntegrityError):
        storage.create_todo(TodoRecord(user_id="ghost", title="Orphan", day_of_week=1))

    # Session is usable again after the rollback
    assert storage.get_todos("ghost") == []
    assert make_todo(storage).user_id == "u1"


def test_delete_wrong_user_keeps_row(storage, user, other_user):
    """Another user cannot delete the row."""
    todo = make_todo(storage)

    assert storage.delete_todo(todo.id, "u2") is False
    assert storage.get_todo(todo.id, "u1") is not None


def test_schedule_item_crud(storage, user):
    """Schedule items follow the same scoped lifecycle."""
    item = storage.create_schedule_item(
        ScheduleItemRecord(user_id="u1", title="Math", time="9:55", day_of_week=2)
    )
    assert item.category == "other"
    assert item.completed is False
    fetched = storage.get_schedule_item(item.id, "u1")
    assert ScheduleItemResponse.model_validate(fetched).time == "9:55"

    updated = storage.update_schedule_item(item.id, "u1", {"time": "10:05"})
    assert updated.time == "10:05"
    assert updated.title == "Math"

    assert [i.id for i in storage.get_schedule_items("u1")] == [item.id]
    assert storage.delete_schedule_item(item.id, "u1") is True
    assert storage.get_schedule_items("u1") == []


def test_assignment_crud(storage, user, other_user):
    """Assignments are scoped by owner."""
    assignment = storage.create_assignment(
        AssignmentRecord(user_id="u1", title="Essay", due_date="2026-11-02", category="english")
    )
    assert AssignmentResponse.model_validate(assignment).completed is False

    assert storage.get_assignment(assignment.id, "u2") is None
    assert storage.update_assignment(assignment.id, "u1", {"completed": True}).completed is True
    assert storage.get_assignments("u2") == []
    assert storage.delete_assignment(assignment.id, "u2") is False
    assert storage.delete_assignment(assignment.id, "u1") is True


def test_quick_task_crud(storage, user):
    """Quick tasks default to medium priority."""
    task = storage.create_quick_task(QuickTaskRecord(user_id="u1", title="Buy pens"))
    assert task.priority == "medium"

    updated = storage.update_quick_task(task.id, "u1", {"priority": "high", "completed": True})
    assert updated.priority == "high"
    assert updated.completed is True
    assert updated.title == "Buy pens"

    assert storage.get_quick_task(task.id, "u1").priority == "high"
    assert storage.delete_quick_task(task.id, "u1") is True
    assert storage.get_quick_tasks("u1") == []


def test_get_user(storage, user):
    """Users are looked up by id."""
    assert storage.get_user("u1").email == "u1@example.com"
    assert storage.get_user("nobody") is None


def test_upsert_user_overwrites_and_refreshes_timestamp(storage):
    """A second upsert replaces the profile and bumps updated_at."""
    first = storage.upsert_user(UserUpsert(id="u1", email="old@example.com", first_name="Old"))
    first_updated_at = first.updated_at

    time.sleep(0.01)
    second = storage.upsert_user(
        UserUpsert(id="u1", email="new@example.com", first_name="New", last_name="Name")
    )

    assert second.id == "u1"
    assert second.email == "new@example.com"
    assert second.first_name == "New"
    assert second.last_name == "Name"
    assert second.updated_at > first_updated_at

    from study_planner.models.user import User

    assert storage.db.query(User).count() == 1


def test_upsert_user_clears_omitted_profile_fields(storage):
    """Upsert overwrites every mutable field, including with nulls."""
    storage.upsert_user(UserUpsert(id="u1", email="a@example.com", last_name="Lovelace"))

    user = storage.upsert_user(UserUpsert(id="u1", email="a@example.com"))

    assert user.last_name is None


def test_upsert_user_duplicate_email_raises_integrity_error(storage):
    """Emails are unique across users."""
    storage.upsert_user(UserUpsert(id="u1", email="same@example.com"))

    with pytest.raises(IntegrityError):
        storage.upsert_user(UserUpsert(id="u2", email="same@example.com"))

    # Session is usable again after the rollback
    assert storage.get_user("u1") is not None


def test_database_errors_become_storage_unavailable():
    """Driver failures are wrapped and the session is rolled back."""
    db = MagicMock()
    db.query.side_effect = OperationalError("SELECT 1", {}, Exception("connection refused"))
    storage = DatabaseStorage(db)

    with pytest.raises(StorageUnavailableError) as exc_info:
        storage.get_todos("u1")

    assert exc_info.value.action == "fetch todos"
    assert str(exc_info.value) == "Failed to fetch todos"
    db.rollback.assert_called_once()


def test_upsert_user_recovers_when_user_inserted_concurrently(storage, db):
    """A first login that loses the insert race is applied as an update."""
    from sqlalchemy.orm import Session

    from study_planner.models.user import User

    real_get = db.get
    lookups = []

    def get_after_other_login(model, ident):
        # The other request commits the same user right after our first lookup
        if not lookups:
            lookups.append(ident)
            other = Session(bind=db.get_bind())
            other.add(User(id=ident, email="first@example.com"))
            other.commit()
            other.close()
            return None
        return real_get(model, ident)

    with patch.object(db, "get", side_effect=get_after_other_login):
        user = storage.upsert_user(UserUpsert(id="u1", email="second@example.com"))

    assert user.email == "second@example.com"
    assert db.query(User).filter(User.id == "u1").count() == 1
