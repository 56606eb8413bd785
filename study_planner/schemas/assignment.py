"""Assignment schemas."""

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr

from study_planner.models.enums import TaskCategory
from study_planner.schemas.common import DueDate, InputSchema, PartialUpdate, Title


class AssignmentCreate(InputSchema):
    """Create an assignment."""

    title: Title
    due_date: DueDate
    completed: StrictBool = False
    category: TaskCategory = TaskCategory.OTHER


class AssignmentRecord(AssignmentCreate):
    """Validated assignment ready for insert, owner attached."""

    user_id: StrictStr


class AssignmentUpdate(PartialUpdate):
    """Update an assignment."""

    title: Title | None = None
    due_date: DueDate | None = None
    completed: StrictBool | None = None
    category: TaskCategory | None = None


class AssignmentResponse(BaseModel):
    """Assignment response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    title: str
    due_date: str
    completed: bool
    category: str
