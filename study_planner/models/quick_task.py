"""Quick task model."""

from sqlalchemy import Boolean, Column, String, Text
from sqlalchemy.orm import relationship

from study_planner.database import Base
from study_planner.models.enums import Priority
from study_planner.models.mixins import OwnedMixin


class QuickTask(Base, OwnedMixin):
    """Unscheduled inbox item."""

    __tablename__ = "quick_tasks"

    title = Column(Text, nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    priority = Column(String(20), nullable=False, default=Priority.MEDIUM.value)

    user = relationship("User", backref="quick_tasks")
