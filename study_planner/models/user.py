"""User model."""

from sqlalchemy import Column, String

from study_planner.database import Base
from study_planner.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User identity, created or refreshed on every login."""

    __tablename__ = "users"

    # Opaque subject id from the identity provider
    id = Column(String(255), primary_key=True)
    email = Column(String(255), unique=True, nullable=True, index=True)
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)
    profile_image_url = Column(String(1000), nullable=True)
