import enum
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator
from sqlmodel import SQLModel, Field, Relationship

if TYPE_CHECKING:
    from .user import User


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert to an aware UTC datetime; naive values are taken to be UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UTCDateTime(TypeDecorator):
    """Timezone-aware timestamp column that always stores and returns UTC.

    SQLite keeps no offset, so values read back from it get UTC attached.
    """
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return as_utc(value)

    def process_result_value(self, value, dialect):
        return as_utc(value)


class TaskStatus(str, enum.Enum):
    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"


class Task(SQLModel, table=True):
    """Task owned by exactly one user."""
    __tablename__ = "tasks"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=150)
    description: Optional[str] = None
    status: TaskStatus = Field(default=TaskStatus.PENDING)
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime, nullable=False)
    due_date: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)
    user_id: str = Field(foreign_key="users.username", index=True, ondelete="CASCADE")

    owner: Optional["User"] = Relationship(back_populates="tasks")
