"""
Tenant model - Multi-tenancy foundation
"""

from sqlmodel import Field, SQLModel, Relationship
from datetime import datetime
from typing import List, TYPE_CHECKING
from enum import Enum
import uuid

from stagehand.core.clock import UTCDateTime, utcnow

if TYPE_CHECKING:
    from stagehand.models.user import User
    from stagehand.models.event import Event
    from stagehand.models.venue import Venue
    from stagehand.models.performer import Performer
    from stagehand.models.client import Client
    from stagehand.models.booking import Booking


class SubscriptionPlan(str, Enum):
    FREE = "free"
    STARTER = "starter"
    PROFESSIONAL = "professional"
    ENTERPRISE = "enterprise"


class SubscriptionStatus(str, Enum):
    TRIALING = "trialing"
    ACTIVE = "active"
    PAST_DUE = "past_due"
    CANCELED = "canceled"


# Deleting a tenant removes everything it owns
_OWNED = {"cascade": "all, delete"}


class Tenant(SQLModel, table=True):
    """Tenant model for multi-tenant architecture"""

    __tablename__ = "tenants"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(index=True, max_length=255)
    slug: str = Field(unique=True, index=True, max_length=100, description="Unique tenant identifier for subdomain routing")

    # Subscription
    subscription_plan: SubscriptionPlan = Field(default=SubscriptionPlan.FREE)
    subscription_status: SubscriptionStatus = Field(default=SubscriptionStatus.TRIALING)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)

    # Relationships
    users: List["User"] = Relationship(back_populates="tenant", sa_relationship_kwargs=_OWNED)
    events: List["Event"] = Relationship(back_populates="tenant", sa_relationship_kwargs=_OWNED)
    venues: List["Venue"] = Relationship(back_populates="tenant", sa_relationship_kwargs=_OWNED)
    performers: List["Performer"] = Relationship(back_populates="tenant", sa_relationship_kwargs=_OWNED)
    clients: List["Client"] = Relationship(back_populates="tenant", sa_relationship_kwargs=_OWNED)
    bookings: List["Booking"] = Relationship(back_populates="tenant", sa_relationship_kwargs=_OWNED)
