"""
Pydantic schemas for tenants
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
import uuid

from stagehand.models.tenant import SubscriptionPlan, SubscriptionStatus

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class TenantCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=3, max_length=100, pattern=SLUG_PATTERN)
    subscription_plan: SubscriptionPlan = SubscriptionPlan.FREE


class TenantUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    subscription_plan: Optional[SubscriptionPlan] = None
    subscription_status: Optional[SubscriptionStatus] = None


class TenantRead(BaseModel):
    id: uuid.UUID
    name: str
    slug: str
    subscription_plan: SubscriptionPlan
    subscription_status: SubscriptionStatus
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
