"""Todo schemas."""

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr

from study_planner.models.enums import Priority, TaskCategory
from study_planner.schemas.common import DayOfWeek, InputSchema, PartialUpdate, Title


class TodoCreate(InputSchema):
    """Create a todo."""

    title: Title
    completed: StrictBool = False
    day_of_week: DayOfWeek
    category: TaskCategory = TaskCategory.OTHER
    priority: Priority = Priority.MEDIUM


class TodoRecord(TodoCreate):
    """Validated todo ready for insert, owner attached."""

    user_id: StrictStr


class TodoUpdate(PartialUpdate):
    """Update a todo."""

    title: Title | None = None
    completed: StrictBool | None = None
    day_of_week: DayOfWeek | None = None
    category: TaskCategory | None = None
    priority: Priority | None = None


class TodoResponse(BaseModel):
    """Todo response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    title: str
    completed: bool
    day_of_week: int
    category: str
    priority: str
