"""Mixins for SQLAlchemy models."""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, String, func
from sqlalchemy.orm import declared_attr


def generate_id() -> str:
    """Generate a fresh primary key for an owned record."""
    return str(uuid.uuid4())


class TimestampMixin:
    """Mixin to add created_at and updated_at timestamp columns."""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class OwnedMixin:
    """Mixin for records that belong to exactly one user.

    The id is generated on insert and never reassigned; every per-item query
    filters on both ``id`` and ``user_id``.
    """

    id = Column(String(36), primary_key=True, default=generate_id)

    @declared_attr
    def user_id(cls):
        return Column(String(255), ForeignKey("users.id"), nullable=False, index=True)
