"""Authentication API endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError

from study_planner.api.dependencies import get_current_user, get_storage, get_token_claims
from study_planner.models.user import User
from study_planner.schemas.auth import UserResponse
from study_planner.services.auth import claims_to_user
from study_planner.services.seeding import seed_user_data
from study_planner.services.storage import DatabaseStorage

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=UserResponse)
def login(
    claims: Annotated[dict[str, Any], Depends(get_token_claims)],
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
):
    """Record a successful sign-in: create the user or refresh their profile."""
    try:
        return storage.upsert_user(claims_to_user(claims))
    except IntegrityError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email is already linked to another account",
        ) from None


@router.get("/user", response_model=UserResponse)
def get_user(
    current_user: Annotated[User, Depends(get_current_user)],
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
):
    """Get current user information, seeding starter data on first visit."""
    seed_user_data(storage, current_user.id)
    return current_user


@router.post("/logout")
def logout(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Logout (client should discard token)."""
    return {"message": "Logged out successfully"}
