"""
User model with roles and tenant scoping
"""

from sqlmodel import Field, SQLModel, Relationship
from datetime import datetime
from typing import Optional, List, TYPE_CHECKING
from enum import Enum
import uuid

from stagehand.core.clock import UTCDateTime, utcnow

if TYPE_CHECKING:
    from stagehand.models.tenant import Tenant
    from stagehand.models.event import Event


class UserRole(str, Enum):
    """User roles for RBAC"""
    OWNER = "owner"
    ADMIN = "admin"
    MEMBER = "member"


class User(SQLModel, table=True):
    """User model with tenant isolation"""

    __tablename__ = "users"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    tenant_id: uuid.UUID = Field(
        foreign_key="tenants.id",
        ondelete="CASCADE",
        index=True,
        description="Tenant ID for multi-tenant isolation"
    )

    # Authentication
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(nullable=False)

    # Profile
    name: Optional[str] = Field(default=None, max_length=255)

    # RBAC
    role: UserRole = Field(default=UserRole.MEMBER, nullable=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)

    # Relationships
    tenant: Optional["Tenant"] = Relationship(back_populates="users")
    created_events: List["Event"] = Relationship(back_populates="created_by")
