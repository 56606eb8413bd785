"""Assignment model."""

from sqlalchemy import Boolean, Column, String, Text
from sqlalchemy.orm import relationship

from study_planner.database import Base
from study_planner.models.enums import TaskCategory
from study_planner.models.mixins import OwnedMixin


class Assignment(Base, OwnedMixin):
    """Assignment with a due date."""

    __tablename__ = "assignments"

    title = Column(Text, nullable=False)
    due_date = Column(String(10), nullable=False)  # ISO calendar date, "2025-03-14"
    completed = Column(Boolean, nullable=False, default=False)
    category = Column(String(50), nullable=False, default=TaskCategory.OTHER.value)

    user = relationship("User", backref="assignments")
