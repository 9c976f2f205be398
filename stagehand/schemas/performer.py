"""
Pydantic schemas for performers
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from decimal import Decimal
import uuid

from stagehand.models.performer import PerformerType


class PerformerCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    stage_name: Optional[str] = Field(default=None, max_length=255)
    type: PerformerType = PerformerType.OTHER
    bio: Optional[str] = None
    specialties: List[str] = []
    setup_time: int = Field(default=30, ge=0, description="Minutes")
    performance_time: int = Field(default=30, ge=0, description="Minutes")
    breakdown_time: int = Field(default=15, ge=0, description="Minutes")
    requirements: Optional[dict] = None
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    website: Optional[str] = Field(default=None, max_length=500)
    standard_rate: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    availability: Optional[dict] = None
    rating: Optional[Decimal] = Field(default=None, ge=0, le=5, max_digits=3, decimal_places=2)


class PerformerUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    stage_name: Optional[str] = Field(default=None, max_length=255)
    type: Optional[PerformerType] = None
    bio: Optional[str] = None
    specialties: Optional[List[str]] = None
    setup_time: Optional[int] = Field(default=None, ge=0)
    performance_time: Optional[int] = Field(default=None, ge=0)
    breakdown_time: Optional[int] = Field(default=None, ge=0)
    requirements: Optional[dict] = None
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    website: Optional[str] = Field(default=None, max_length=500)
    standard_rate: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    availability: Optional[dict] = None
    rating: Optional[Decimal] = Field(default=None, ge=0, le=5, max_digits=3, decimal_places=2)


class PerformerRead(BaseModel):
    id: uuid.UUID
    tenant_id: uuid.UUID
    name: str
    stage_name: Optional[str] = None
    type: PerformerType
    bio: Optional[str] = None
    specialties: List[str]
    setup_time: int
    performance_time: int
    breakdown_time: int
    requirements: Optional[dict] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    standard_rate: Optional[Decimal] = None
    availability: Optional[dict] = None
    rating: Optional[Decimal] = None
    total_bookings: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
