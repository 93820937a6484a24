"""Pydantic models for the Task Tracker API.

Wire names are camelCase (``dueDate``, ``createdAt``); attributes stay
snake_case and either form is accepted on input.
"""

from datetime import UTC, date, datetime, time
from enum import Enum
from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StringConstraints,
    field_validator,
)
from pydantic.alias_generators import to_camel

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


class TaskStatus(str, Enum):
    """Closed set of task states. Any state may move to any other."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SortField(str, Enum):
    """Fields a task listing may be ordered by."""

    CREATED_AT = "createdAt"
    TITLE = "title"
    DUE_DATE = "dueDate"

    @property
    def attribute(self) -> str:
        """Name of the matching ``Task`` attribute."""
        return {
            SortField.CREATED_AT: "created_at",
            SortField.TITLE: "title",
            SortField.DUE_DATE: "due_date",
        }[self]


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


def _calendar_input(value: object) -> object:
    # Numbers and digit-only strings would otherwise parse as Unix timestamps.
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, str) and not value.strip().lstrip("+-").replace(".", "", 1).isdigit():
        return value
    raise ValueError("must be an ISO 8601 date or date-time")


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


TitleStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=TITLE_MAX_LENGTH),
]
DescriptionStr = Annotated[str, StringConstraints(max_length=DESCRIPTION_MAX_LENGTH)]
DueDate = Annotated[datetime, BeforeValidator(_calendar_input), AfterValidator(_as_utc)]


class CamelModel(BaseModel):
    """Base model emitting and accepting camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TaskCreate(CamelModel):
    """Request body for creating a new task."""

    title: TitleStr = Field(..., description="The task title (required, 1-100 characters)")
    description: DescriptionStr | None = Field(
        default=None,
        description="Optional free text, up to 500 characters",
    )
    status: TaskStatus = Field(default=TaskStatus.PENDING)
    priority: TaskPriority = Field(default=TaskPriority.MEDIUM)
    due_date: DueDate | None = Field(default=None, description="Optional due date")
    tags: list[str] = Field(default_factory=list)


class TaskUpdate(CamelModel):
    """Request body for a partial update. Absent fields are left untouched."""

    title: TitleStr | None = None
    description: DescriptionStr | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    due_date: DueDate | None = None
    tags: list[str] | None = None

    @field_validator("title", "status", "priority", "tags")
    @classmethod
    def _reject_null(cls, value: object) -> object:
        # Only runs for values the caller actually sent.
        if value is None:
            raise ValueError("may not be null")
        return value


class Task(CamelModel):
    """A task item in the task tracker."""

    id: str = Field(..., description="Unique identifier for the task")
    title: str
    description: str | None = None
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: datetime | None = None
    tags: list[str] = Field(default_factory=list)
    created_at: datetime = Field(..., description="When the task was created")
    updated_at: datetime = Field(..., description="When the task was last updated")


class TaskQuery(CamelModel):
    """Normalized filter and sort parameters for listing tasks.

    Filter values outside the known vocabulary are kept as plain strings so
    that they match nothing instead of being rejected.
    """

    model_config = ConfigDict(frozen=True)

    status: TaskStatus | str | None = None
    priority: TaskPriority | str | None = None
    sort_field: SortField = SortField.CREATED_AT
    sort_direction: SortDirection = SortDirection.DESC


class TaskStats(CamelModel):
    """Summary of the task collection, computed on demand."""

    total: int = 0
    by_status: dict[str, int] = Field(default_factory=dict)
    by_priority: dict[str, int] = Field(default_factory=dict)
    completion_rate: int = 0


class FieldError(BaseModel):
    """A single field-level validation failure."""

    field: str
    message: str


class TaskResponse(BaseModel):
    success: bool = True
    message: str | None = None
    data: Task


class TaskListResponse(BaseModel):
    success: bool = True
    count: int
    data: list[Task]


class StatsResponse(BaseModel):
    success: bool = True
    data: TaskStats


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class HealthResponse(BaseModel):
    """Response from the health check endpoint."""

    status: str = "healthy"
    version: str = "1.0.0"
