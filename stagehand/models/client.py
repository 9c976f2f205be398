"""
Client model - the customer an event is organised for
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


class ClientType(str, Enum):
    INDIVIDUAL = "individual"
    CORPORATE = "corporate"


class Client(SQLModel, table=True):
    """Client model with tenant isolation"""

    __tablename__ = "clients"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    tenant_id: uuid.UUID = Field(
        foreign_key="tenants.id",
        ondelete="CASCADE",
        index=True,
        description="Tenant ID for multi-tenant isolation"
    )

    name: str = Field(index=True, max_length=255)
    email: str = Field(index=True, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    company: Optional[str] = Field(default=None, max_length=255)
    address: Optional[str] = Field(default=None, max_length=500)
    city: Optional[str] = Field(default=None, max_length=100)

    client_type: ClientType = Field(default=ClientType.INDIVIDUAL, index=True)
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    notes: Optional[str] = Field(default=None)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)

    # Relationships
    tenant: Optional["Tenant"] = Relationship(back_populates="clients")
    events: List["Event"] = Relationship(back_populates="client")
