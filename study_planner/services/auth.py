"""Identity token handling.

Tokens are minted by the identity provider with a shared secret; the API
only verifies them. ``create_access_token`` exists for local tooling and
tests.
"""

from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt

from study_planner.config import get_settings
from study_planner.schemas.auth import UserUpsert

settings = get_settings()


def create_access_token(
    user_id: str,
    email: str | None = None,
    first_name: str | None = None,
    last_name: str | None = None,
    profile_image_url: str | None = None,
) -> str:
    """Create a signed JWT carrying the user's identity claims."""
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode: dict[str, Any] = {
        "sub": user_id,
        "email": email,
        "first_name": first_name,
        "last_name": last_name,
        "profile_image_url": profile_image_url,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token."""
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


def claims_to_user(payload: dict[str, Any]) -> UserUpsert:
    """Map identity claims onto the user profile fields."""
    return UserUpsert(
        id=str(payload["sub"]),
        email=payload.get("email"),
        first_name=payload.get("first_name"),
        last_name=payload.get("last_name"),
        profile_image_url=payload.get("profile_image_url"),
    )
