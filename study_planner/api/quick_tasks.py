"""Quick task (inbox) API endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from study_planner.api.dependencies import get_current_user, get_storage
from study_planner.models.user import User
from study_planner.schemas.quick_task import QuickTaskResponse
from study_planner.services.storage import DatabaseStorage
from study_planner.services.validation import EntityKind, decode_create, decode_update

router = APIRouter(prefix="/api/quick-tasks", tags=["quick-tasks"])


@router.get("", response_model=list[QuickTaskResponse])
def list_quick_tasks(
    current_user: Annotated[User, Depends(get_current_user)],
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
):
    """List the caller's quick tasks."""
    return storage.get_quick_tasks(current_user.id)


@router.post("", response_model=QuickTaskResponse, status_code=status.HTTP_201_CREATED)
def create_quick_task(
    payload: Annotated[Any, Body()],
    current_user: Annotated[User, Depends(get_current_user)],
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
):
    """Drop a task into the caller's inbox."""
    record = decode_create(EntityKind.QUICK_TASK, payload, current_user.id)
    return storage.create_quick_task(record)


@router.patch("/{task_id}", response_model=QuickTaskResponse)
def update_quick_task(
    task_id: str,
    payload: Annotated[Any, Body()],
    current_user: Annotated[User, Depends(get_current_user)],
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
):
    """Apply a partial update to a quick task."""
    updates = decode_update(EntityKind.QUICK_TASK, payload)
    task = storage.update_quick_task(task_id, current_user.id, updates)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Quick task not found")
    return task


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_quick_task(
    task_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
):
    """Delete a quick task."""
    if not storage.delete_quick_task(task_id, current_user.id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Quick task not found")
