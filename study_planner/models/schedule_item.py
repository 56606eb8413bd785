"""Schedule item model."""

from sqlalchemy import Boolean, Column, Integer, String, Text
from sqlalchemy.orm import relationship

from study_planner.database import Base
from study_planner.models.enums import TaskCategory
from study_planner.models.mixins import OwnedMixin


class ScheduleItem(Base, OwnedMixin):
    """Time-blocked activity on a given weekday."""

    __tablename__ = "schedule_items"

    title = Column(Text, nullable=False)
    time = Column(String(5), nullable=False)  # "7:30", "12:50"
    day_of_week = Column(Integer, nullable=False)
    category = Column(String(50), nullable=False, default=TaskCategory.OTHER.value)
    completed = Column(Boolean, nullable=False, default=False)

    user = relationship("User", backref="schedule_items")
