"""Todo model."""

from sqlalchemy import Boolean, Column, Integer, String, Text
from sqlalchemy.orm import relationship

from study_planner.database import Base
from study_planner.models.enums import Priority, TaskCategory
from study_planner.models.mixins import OwnedMixin


class Todo(Base, OwnedMixin):
    """Daily/weekly to-do list entry."""

    __tablename__ = "todos"

    title = Column(Text, nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    day_of_week = Column(Integer, nullable=False)  # 0 = Sunday
    category = Column(String(50), nullable=False, default=TaskCategory.OTHER.value)
    priority = Column(String(20), nullable=False, default=Priority.MEDIUM.value)

    user = relationship("User", backref="todos")
