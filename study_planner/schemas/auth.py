"""Authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserUpsert(BaseModel):
    """User fields taken from identity token claims."""

    id: str = Field(..., min_length=1, max_length=255)
    email: str | None = Field(None, max_length=255)
    first_name: str | None = Field(None, max_length=255)
    last_name: str | None = Field(None, max_length=255)
    profile_image_url: str | None = Field(None, max_length=1000)


class UserResponse(BaseModel):
    """User information response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str | None
    first_name: str | None
    last_name: str | None
    profile_image_url: str | None
    created_at: datetime
    updated_at: datetime
