"""Schedule item schemas."""

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr

from study_planner.models.enums import TaskCategory
from study_planner.schemas.common import DayOfWeek, InputSchema, PartialUpdate, TimeOfDay, Title


class ScheduleItemCreate(InputSchema):
    """Create a schedule item."""

    title: Title
    time: TimeOfDay
    day_of_week: DayOfWeek
    category: TaskCategory = TaskCategory.OTHER
    completed: StrictBool = False


class ScheduleItemRecord(ScheduleItemCreate):
    """Validated schedule item ready for insert, owner attached."""

    user_id: StrictStr


class ScheduleItemUpdate(PartialUpdate):
    """Update a schedule item."""

    title: Title | None = None
    time: TimeOfDay | None = None
    day_of_week: DayOfWeek | None = None
    category: TaskCategory | None = None
    completed: StrictBool | None = None


class ScheduleItemResponse(BaseModel):
    """Schedule item response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    title: str
    time: str
    day_of_week: int
    category: str
    completed: bool
