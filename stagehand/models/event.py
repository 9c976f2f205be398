"""
Event model - the unit of planning

An event belongs to a tenant, is created by a user and may be held at a
venue for a client. Performers are attached through bookings.
"""

from sqlmodel import Field, SQLModel, Relationship
from sqlalchemy import Column, JSON
from datetime import datetime
from decimal import Decimal
from typing import Optional, List, TYPE_CHECKING
from enum import Enum
import uuid

from stagehand.core.clock import UTCDateTime, utcnow

if TYPE_CHECKING:
    from stagehand.models.tenant import Tenant
    from stagehand.models.user import User
    from stagehand.models.venue import Venue
    from stagehand.models.client import Client
    from stagehand.models.booking import Booking
    from stagehand.models.event_task import EventTask


class EventType(str, Enum):
    CORPORATE = "corporate"
    WEDDING = "wedding"
    FESTIVAL = "festival"
    PRIVATE_PARTY = "private_party"
    GALA = "gala"
    CONCERT = "concert"
    PRODUCT_LAUNCH = "product_launch"
    OTHER = "other"


class EventStatus(str, Enum):
    """Lifecycle of an event"""
    PLANNING = "planning"        # Being put together
    CONFIRMED = "confirmed"      # Client signed off
    IN_PROGRESS = "in_progress"  # Happening now
    COMPLETED = "completed"      # Finished
    CANCELLED = "cancelled"      # Called off


EVENT_TRANSITIONS = {
    EventStatus.PLANNING: [EventStatus.CONFIRMED, EventStatus.CANCELLED],
    EventStatus.CONFIRMED: [EventStatus.PLANNING, EventStatus.IN_PROGRESS, EventStatus.CANCELLED],
    EventStatus.IN_PROGRESS: [EventStatus.COMPLETED, EventStatus.CANCELLED],
    EventStatus.COMPLETED: [],  # Final state
    EventStatus.CANCELLED: [],  # Final state
}


class Event(SQLModel, table=True):
    """Event with schedule, budget and generated timeline"""

    __tablename__ = "events"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    tenant_id: uuid.UUID = Field(
        foreign_key="tenants.id",
        ondelete="CASCADE",
        index=True,
        description="Tenant ID for multi-tenant isolation"
    )

    # Basic info
    name: str = Field(max_length=255)
    type: EventType = Field(default=EventType.CORPORATE, index=True)
    status: EventStatus = Field(default=EventStatus.PLANNING, index=True)

    # Schedule
    date: datetime = Field(index=True, sa_type=UTCDateTime, description="Day the event takes place")
    start_time: str = Field(max_length=5, description="Start time as HH:MM")
    end_time: str = Field(max_length=5, description="End time as HH:MM")
    guest_count: Optional[int] = Field(default=None)

    description: Optional[str] = Field(default=None)
    notes: Optional[str] = Field(default=None)

    # Location and client
    venue_id: Optional[uuid.UUID] = Field(
        default=None,
        foreign_key="venues.id",
        ondelete="SET NULL",
        index=True,
    )
    venue_custom: Optional[str] = Field(
        default=None,
        max_length=500,
        description="Free-form location when the venue is not in the catalog"
    )
    client_id: Optional[uuid.UUID] = Field(
        default=None,
        foreign_key="clients.id",
        ondelete="SET NULL",
        index=True,
    )

    # Budget
    total_budget: Optional[Decimal] = Field(default=None, max_digits=12, decimal_places=2)
    spent_amount: Optional[Decimal] = Field(default=None, max_digits=12, decimal_places=2)

    # Generated timeline (see services.timeline_optimizer)
    timeline: Optional[dict] = Field(default=None, sa_column=Column(JSON, nullable=True))

    created_by_id: uuid.UUID = Field(foreign_key="users.id", index=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)

    # Relationships
    tenant: Optional["Tenant"] = Relationship(back_populates="events")
    created_by: Optional["User"] = Relationship(back_populates="created_events")
    venue: Optional["Venue"] = Relationship(back_populates="events")
    client: Optional["Client"] = Relationship(back_populates="events")
    bookings: List["Booking"] = Relationship(
        back_populates="event",
        sa_relationship_kwargs={"cascade": "all, delete"}
    )
    tasks: List["EventTask"] = Relationship(
        back_populates="event",
        sa_relationship_kwargs={"cascade": "all, delete"}
    )

    def can_transition_to(self, new_status: EventStatus) -> tuple[bool, str]:
        """Check if event can transition to new status"""
        if new_status in EVENT_TRANSITIONS.get(self.status, []):
            return True, "Can transition"
        return False, f"Cannot transition from {self.status.value} to {new_status.value}"

    def transition_to(self, new_status: EventStatus) -> None:
        allowed, reason = self.can_transition_to(new_status)
        if not allowed:
            raise ValueError(reason)
        self.status = new_status
        self.updated_at = utcnow()

    def is_editable(self) -> bool:
        return self.status not in (EventStatus.COMPLETED, EventStatus.CANCELLED)
