"""Schedule API endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from study_planner.api.dependencies import get_current_user, get_storage
from study_planner.models.user import User
from study_planner.schemas.schedule import ScheduleItemResponse
from study_planner.services.storage import DatabaseStorage
from study_planner.services.validation import EntityKind, decode_create, decode_update

router = APIRouter(prefix="/api/schedule", tags=["schedule"])


@router.get("", response_model=list[ScheduleItemResponse])
def list_schedule_items(
    current_user: Annotated[User, Depends(get_current_user)],
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
):
    """List the caller's weekly schedule."""
    return storage.get_schedule_items(current_user.id)


@router.post("", response_model=ScheduleItemResponse, status_code=status.HTTP_201_CREATED)
def create_schedule_item(
    payload: Annotated[Any, Body()],
    current_user: Annotated[User, Depends(get_current_user)],
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
):
    """Add a time block to the caller's schedule."""
    record = decode_create(EntityKind.SCHEDULE_ITEM, payload, current_user.id)
    return storage.create_schedule_item(record)


@router.patch("/{item_id}", response_model=ScheduleItemResponse)
def update_schedule_item(
    item_id: str,
    payload: Annotated[Any, Body()],
    current_user: Annotated[User, Depends(get_current_user)],
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
):
    """Apply a partial update to a schedule item."""
    updates = decode_update(EntityKind.SCHEDULE_ITEM, payload)
    item = storage.update_schedule_item(item_id, current_user.id, updates)
    if item is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Schedule item not found"
        )
    return item


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_schedule_item(
    item_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
):
    """Remove a schedule item."""
    if not storage.delete_schedule_item(item_id, current_user.id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Schedule item not found"
        )
