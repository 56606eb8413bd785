"""Quick task schemas."""

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr

from study_planner.models.enums import Priority
from study_planner.schemas.common import InputSchema, PartialUpdate, Title


class QuickTaskCreate(InputSchema):
    """Create a quick task."""

    title: Title
    completed: StrictBool = False
    priority: Priority = Priority.MEDIUM


class QuickTaskRecord(QuickTaskCreate):
    """Validated quick task ready for insert, owner attached."""

    user_id: StrictStr


class QuickTaskUpdate(PartialUpdate):
    """Update a quick task."""

    title: Title | None = None
    completed: StrictBool | None = None
    priority: Priority | None = None


class QuickTaskResponse(BaseModel):
    """Quick task response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    title: str
    completed: bool
    priority: str
