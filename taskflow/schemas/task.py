from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from ..models import TaskStatus, as_utc


class CamelModel(BaseModel):
    """Schemas use camelCase on the wire and accept snake_case too."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class TaskBase(CamelModel):
    """Base task schema with the client-editable fields."""
    title: str = Field(min_length=1, max_length=150)
    description: Optional[str] = None
    due_date: Optional[datetime] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Title is required.")
        return value

    @field_validator("due_date")
    @classmethod
    def due_date_in_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class TaskCreate(TaskBase):
    """Schema for creating new tasks. Status and timestamps are server-side."""
    pass


class TaskUpdate(TaskBase):
    """Schema for a full replace of an existing task."""
    status: TaskStatus


class Task(TaskBase):
    """Complete task schema with all fields."""
    id: int
    status: TaskStatus
    created_at: datetime
    user_id: str

    @field_validator("created_at")
    @classmethod
    def created_at_in_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class TaskCompletedResponse(CamelModel):
    """Returned by an update that moves a task into Completed."""
    task: Task
    motivational_message: str
