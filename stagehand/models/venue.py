"""
Venue model
"""

from sqlmodel import Field, SQLModel, Relationship
from sqlalchemy import Column, JSON
from datetime import datetime
from typing import Optional, List, TYPE_CHECKING
from enum import Enum
import uuid

from stagehand.core.clock import UTCDateTime, utcnow

if TYPE_CHECKING:
    from stagehand.models.tenant import Tenant
    from stagehand.models.event import Event


class VenueType(str, Enum):
    INDOOR = "indoor"
    OUTDOOR = "outdoor"
    MIXED = "mixed"


class Venue(SQLModel, table=True):
    """Venue model with tenant isolation"""

    __tablename__ = "venues"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    tenant_id: uuid.UUID = Field(
        foreign_key="tenants.id",
        ondelete="CASCADE",
        index=True,
        description="Tenant ID for multi-tenant isolation"
    )

    # Basic info
    name: str = Field(index=True, max_length=255)
    type: VenueType = Field(default=VenueType.INDOOR)
    address: Optional[str] = Field(default=None, max_length=500)
    city: Optional[str] = Field(default=None, max_length=100, index=True)
    capacity: Optional[int] = Field(default=None)

    # Access windows as HH:MM
    setup_access_time: Optional[str] = Field(default=None, max_length=5)
    curfew: Optional[str] = Field(default=None, max_length=5)
    restrictions: List[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
        description="House rules, e.g. 'no open flame'"
    )

    # Contact
    contact_name: Optional[str] = Field(default=None, max_length=255)
    contact_email: Optional[str] = Field(default=None, max_length=255)
    contact_phone: Optional[str] = Field(default=None, max_length=50)

    notes: Optional[str] = Field(default=None)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)

    # Relationships
    tenant: Optional["Tenant"] = Relationship(back_populates="venues")
    events: List["Event"] = Relationship(back_populates="venue")
