"""
Event task model - to-do items scoped to a single event
"""

from sqlmodel import Field, SQLModel, Relationship
from datetime import datetime
from typing import Optional, TYPE_CHECKING
from enum import Enum
import uuid

from stagehand.core.clock import UTCDateTime, as_utc, utcnow

if TYPE_CHECKING:
    from stagehand.models.event import Event


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class EventTask(SQLModel, table=True):
    """Task on an event checklist; tenant is inherited from the event"""

    __tablename__ = "event_tasks"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    event_id: uuid.UUID = Field(foreign_key="events.id", ondelete="CASCADE", index=True)

    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)
    status: TaskStatus = Field(default=TaskStatus.PENDING, index=True)
    priority: TaskPriority = Field(default=TaskPriority.MEDIUM)

    due_date: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)
    completed_at: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)
    assigned_to: Optional[str] = Field(default=None, max_length=255, description="Free-form assignee name")

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)

    # Relationships
    event: Optional["Event"] = Relationship(back_populates="tasks")

    def set_status(self, new_status: TaskStatus) -> None:
        """Change status, stamping or clearing completed_at"""
        if new_status == TaskStatus.COMPLETED and self.status != TaskStatus.COMPLETED:
            self.completed_at = utcnow()
        elif new_status != TaskStatus.COMPLETED:
            self.completed_at = None
        self.status = new_status
        self.updated_at = utcnow()

    def is_overdue(self, now: Optional[datetime] = None) -> bool:
        if self.due_date is None or self.status == TaskStatus.COMPLETED:
            return False
        return as_utc(self.due_date) < as_utc(now or utcnow())
