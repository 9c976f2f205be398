"""
Booking model - links one performer to one event
Carries the performer's call-time markers and the payment state of the gig
"""

from sqlmodel import Field, SQLModel, Relationship
from datetime import datetime
from decimal import Decimal
from typing import Optional, TYPE_CHECKING
from enum import Enum
import uuid

from stagehand.core.clock import UTCDateTime, utcnow

if TYPE_CHECKING:
    from stagehand.models.tenant import Tenant
    from stagehand.models.event import Event
    from stagehand.models.performer import Performer


class BookingStatus(str, Enum):
    """Status of a performer booking"""
    PENDING = "pending"      # Offer sent, waiting for performer
    CONFIRMED = "confirmed"  # Performer agreed
    COMPLETED = "completed"  # Gig played
    CANCELLED = "cancelled"  # Called off by either side


BOOKING_TRANSITIONS = {
    BookingStatus.PENDING: [BookingStatus.CONFIRMED, BookingStatus.CANCELLED],
    BookingStatus.CONFIRMED: [BookingStatus.COMPLETED, BookingStatus.CANCELLED],
    BookingStatus.COMPLETED: [],  # Final state
    BookingStatus.CANCELLED: [],  # Final state
}


class Booking(SQLModel, table=True):
    """Performer booking for an event"""

    __tablename__ = "bookings"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    tenant_id: uuid.UUID = Field(
        foreign_key="tenants.id",
        ondelete="CASCADE",
        index=True,
        description="Tenant ID for multi-tenant isolation"
    )

    event_id: uuid.UUID = Field(foreign_key="events.id", ondelete="CASCADE", index=True)
    performer_id: uuid.UUID = Field(foreign_key="performers.id", ondelete="CASCADE", index=True)

    status: BookingStatus = Field(default=BookingStatus.PENDING, index=True)

    # Schedule markers as HH:MM, filled in by the timeline optimizer
    call_time: Optional[str] = Field(default=None, max_length=5)
    setup_start: Optional[str] = Field(default=None, max_length=5)
    performance_start: Optional[str] = Field(default=None, max_length=5)
    performance_end: Optional[str] = Field(default=None, max_length=5)
    load_out: Optional[str] = Field(default=None, max_length=5)

    # Payment
    agreed_rate: Decimal = Field(max_digits=12, decimal_places=2)
    deposit: Optional[Decimal] = Field(default=None, max_digits=12, decimal_places=2)
    paid_amount: Decimal = Field(default=Decimal("0.00"), max_digits=12, decimal_places=2)

    # Contract
    contract_signed: bool = Field(default=False)
    contract_url: Optional[str] = Field(default=None, max_length=500)

    notes: Optional[str] = Field(default=None)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)

    # Relationships
    tenant: Optional["Tenant"] = Relationship(back_populates="bookings")
    event: Optional["Event"] = Relationship(back_populates="bookings")
    performer: Optional["Performer"] = Relationship(back_populates="bookings")

    def can_transition_to(self, new_status: BookingStatus) -> tuple[bool, str]:
        """Check if booking can transition to new status"""
        if new_status in BOOKING_TRANSITIONS.get(self.status, []):
            return True, "Can transition"
        return False, f"Cannot transition from {self.status.value} to {new_status.value}"

    def transition_to(self, new_status: BookingStatus) -> None:
        allowed, reason = self.can_transition_to(new_status)
        if not allowed:
            raise ValueError(reason)
        self.status = new_status
        self.updated_at = utcnow()

    def is_active(self) -> bool:
        return self.status != BookingStatus.CANCELLED

    def outstanding_amount(self) -> Decimal:
        """Amount still owed to the performer"""
        return self.agreed_rate - self.paid_amount

    def apply_schedule(self, call_times: dict) -> None:
        """Copy call-time markers from a generated timeline entry"""
        self.call_time = call_times.get("call_time")
        self.setup_start = call_times.get("setup_start")
        self.performance_start = call_times.get("performance_start")
        self.performance_end = call_times.get("performance_end")
        self.load_out = call_times.get("load_out")
        self.updated_at = utcnow()
