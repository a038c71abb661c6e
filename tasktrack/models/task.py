"""Task data model for tasktrack."""

from datetime import date, datetime
from typing import List, Optional, Tuple
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator

from tasktrack.models.dates import to_utc


class TaskStatus(str, Enum):
    """Task status enumeration."""
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    DONE = "done"


STATUS_VALUES = tuple(status.value for status in TaskStatus)


class Task(BaseModel):
    """Canonical Task model.

    Only `status` changes after creation; the store swaps it in with
    `model_copy`, every other field is fixed for the task's lifetime.
    Tags are a tuple so a task handed out by the store cannot be edited
    in place.
    """

    model_config = ConfigDict(use_enum_values=True, populate_by_name=True, frozen=True)

    id: str = Field(..., min_length=1, description="Unique task identifier (UUID v4)")
    text: str = Field(..., description="Task text (trimmed, never empty)")
    status: TaskStatus = Field(TaskStatus.PENDING, description="Task status")
    created_at: datetime = Field(..., alias="createdAt", description="Task creation timestamp (UTC)")
    tags: Tuple[str, ...] = Field(default_factory=tuple, description="Tag ids in display order")
    start_date: Optional[date] = Field(None, alias="startDate", description="Start date (date-only)")
    deadline: Optional[date] = Field(None, description="Deadline (date-only, may be in the past)")
    assignee: Optional[str] = Field(None, description="Person responsible for the task")

    @field_validator("text")
    @classmethod
    def _validate_text(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("text must not be empty")
        return v

    @field_validator("created_at")
    @classmethod
    def _validate_created_at(cls, v):
        normalized = to_utc(v)
        if normalized is None:
            raise ValueError("created_at is outside the representable UTC range")
        return normalized

    @field_validator("tags", mode="before")
    @classmethod
    def _coerce_tags(cls, v):
        # A single tag id, not a sequence of characters
        if isinstance(v, str):
            return (v,)
        if v is None:
            return ()
        return v

    @field_validator("tags")
    @classmethod
    def _validate_tags(cls, v):
        # Blank ids are dropped; first occurrence wins
        seen = set()
        out: List[str] = []
        for tag in v:
            if not tag.strip() or tag in seen:
                continue
            seen.add(tag)
            out.append(tag)
        return tuple(out)

    @field_validator("assignee")
    @classmethod
    def _validate_assignee(cls, v):
        if v is None:
            return None
        v = v.strip()
        return v or None

    @property
    def is_done(self) -> bool:
        return self.status == TaskStatus.DONE
