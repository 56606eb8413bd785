"""Assignment API endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from study_planner.api.dependencies import get_current_user, get_storage
from study_planner.models.user import User
from study_planner.schemas.assignment import AssignmentResponse
from study_planner.services.storage import DatabaseStorage
from study_planner.services.validation import EntityKind, decode_create, decode_update

router = APIRouter(prefix="/api/assignments", tags=["assignments"])


@router.get("", response_model=list[AssignmentResponse])
def list_assignments(
    current_user: Annotated[User, Depends(get_current_user)],
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
):
    """List the caller's assignments."""
    return storage.get_assignments(current_user.id)


@router.post("", response_model=AssignmentResponse, status_code=status.HTTP_201_CREATED)
def create_assignment(
    payload: Annotated[Any, Body()],
    current_user: Annotated[User, Depends(get_current_user)],
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
):
    """Create an assignment."""
    record = decode_create(EntityKind.ASSIGNMENT, payload, current_user.id)
    return storage.create_assignment(record)


@router.patch("/{assignment_id}", response_model=AssignmentResponse)
def update_assignment(
    assignment_id: str,
    payload: Annotated[Any, Body()],
    current_user: Annotated[User, Depends(get_current_user)],
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
):
    """Update an assignment (e.g. mark it done or move the due date)."""
    updates = decode_update(EntityKind.ASSIGNMENT, payload)
    assignment = storage.update_assignment(assignment_id, current_user.id, updates)
    if assignment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Assignment not found")
    return assignment


@router.delete("/{assignment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_assignment(
    assignment_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
):
    """Delete an assignment."""
    if not storage.delete_assignment(assignment_id, current_user.id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Assignment not found")
