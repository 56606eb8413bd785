"""FastAPI dependencies for authentication and storage."""

import logging
from typing import Annotated, Any

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from study_planner.database import get_db
from study_planner.models.user import User
from study_planner.services.auth import decode_access_token
from study_planner.services.storage import DatabaseStorage

logger = logging.getLogger(__name__)

security = HTTPBearer()


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_storage(db: Annotated[Session, Depends(get_db)]) -> DatabaseStorage:
    """Get a store bound to the request's database session."""
    return DatabaseStorage(db)


def get_token_claims(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
) -> dict[str, Any]:
    """Verify the bearer token and return its claims."""
    payload = decode_access_token(credentials.credentials)
    if payload is None or not payload.get("sub"):
        logger.warning("Rejected request with invalid bearer token")
        raise _unauthorized("Invalid authentication credentials")
    return payload


def get_current_user_id(
    claims: Annotated[dict[str, Any], Depends(get_token_claims)],
) -> str:
    """The authenticated caller's user id. Never read from the request body."""
    return str(claims["sub"])


def get_current_user(
    user_id: Annotated[str, Depends(get_current_user_id)],
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
) -> User:
    """Get the current user's record; the user must have logged in before."""
    user = storage.get_user(user_id)
    if user is None:
        raise _unauthorized("User not found")
    return user
