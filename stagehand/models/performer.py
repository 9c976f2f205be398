"""
Performer model - acts that can be booked for events
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
    from stagehand.models.booking import Booking


class PerformerType(str, Enum):
    FIRE = "fire"
    MAGIC = "magic"
    CIRCUS = "circus"
    MUSIC = "music"
    DANCE = "dance"
    COMEDY = "comedy"
    INTERACTIVE = "interactive"
    OTHER = "other"


class Performer(SQLModel, table=True):
    """Performer model with tenant isolation"""

    __tablename__ = "performers"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    tenant_id: uuid.UUID = Field(
        foreign_key="tenants.id",
        ondelete="CASCADE",
        index=True,
        description="Tenant ID for multi-tenant isolation"
    )

    # Profile
    name: str = Field(index=True, max_length=255)
    stage_name: Optional[str] = Field(default=None, max_length=255)
    type: PerformerType = Field(default=PerformerType.OTHER, index=True)
    bio: Optional[str] = Field(default=None)
    specialties: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    # Act durations in minutes
    setup_time: int = Field(default=30, ge=0)
    performance_time: int = Field(default=30, ge=0)
    breakdown_time: int = Field(default=15, ge=0)

    # Technical rider, e.g. {"space": "5x5m", "power": true, "safety_distance": 3}
    requirements: Optional[dict] = Field(default=None, sa_column=Column(JSON, nullable=True))

    # Contact
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    website: Optional[str] = Field(default=None, max_length=500)

    # Commercials
    standard_rate: Optional[Decimal] = Field(default=None, max_digits=12, decimal_places=2)
    availability: Optional[dict] = Field(default=None, sa_column=Column(JSON, nullable=True))
    rating: Optional[Decimal] = Field(default=None, max_digits=3, decimal_places=2)
    total_bookings: int = Field(default=0, description="Bookings created for this performer")

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)

    # Relationships
    tenant: Optional["Tenant"] = Relationship(back_populates="performers")
    bookings: List["Booking"] = Relationship(
        back_populates="performer",
        sa_relationship_kwargs={"cascade": "all, delete"}
    )

    @property
    def display_name(self) -> str:
        return self.stage_name or self.name

    def safety_distance(self) -> Optional[float]:
        """Safety distance in meters from the technical rider, if any"""
        if not self.requirements:
            return None
        value = self.requirements.get("safety_distance")
        return float(value) if value is not None else None
