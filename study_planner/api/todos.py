"""Todo API endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from study_planner.api.dependencies import get_current_user, get_storage
from study_planner.models.user import User
from study_planner.schemas.todo import TodoResponse
from study_planner.services.storage import DatabaseStorage
from study_planner.services.validation import EntityKind, decode_create, decode_update

router = APIRouter(prefix="/api/todos", tags=["todos"])


@router.get("", response_model=list[TodoResponse])
def list_todos(
    current_user: Annotated[User, Depends(get_current_user)],
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
):
    """List the caller's todos."""
    return storage.get_todos(current_user.id)


@router.post("", response_model=TodoResponse, status_code=status.HTTP_201_CREATED)
def create_todo(
    payload: Annotated[Any, Body()],
    current_user: Annotated[User, Depends(get_current_user)],
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
):
    """Create a todo owned by the caller."""
    record = decode_create(EntityKind.TODO, payload, current_user.id)
    return storage.create_todo(record)


@router.patch("/{todo_id}", response_model=TodoResponse)
def update_todo(
    todo_id: str,
    payload: Annotated[Any, Body()],
    current_user: Annotated[User, Depends(get_current_user)],
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
):
    """Apply a partial update to one of the caller's todos."""
    updates = decode_update(EntityKind.TODO, payload)
    todo = storage.update_todo(todo_id, current_user.id, updates)
    if todo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")
    return todo


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_todo(
    todo_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
):
    """Delete one of the caller's todos."""
    if not storage.delete_todo(todo_id, current_user.id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")
