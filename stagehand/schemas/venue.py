"""
Pydantic schemas for venues
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
import uuid

from stagehand.models.venue import VenueType
from stagehand.schemas.event import TIME_PATTERN


class VenueCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    type: VenueType = VenueType.INDOOR
    address: Optional[str] = Field(default=None, max_length=500)
    city: Optional[str] = Field(default=None, max_length=100)
    capacity: Optional[int] = Field(default=None, ge=0)
    setup_access_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    curfew: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    restrictions: List[str] = []
    contact_name: Optional[str] = Field(default=None, max_length=255)
    contact_email: Optional[str] = Field(default=None, max_length=255)
    contact_phone: Optional[str] = Field(default=None, max_length=50)
    notes: Optional[str] = None


class VenueUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    type: Optional[VenueType] = None
    address: Optional[str] = Field(default=None, max_length=500)
    city: Optional[str] = Field(default=None, max_length=100)
    capacity: Optional[int] = Field(default=None, ge=0)
    setup_access_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    curfew: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    restrictions: Optional[List[str]] = None
    contact_name: Optional[str] = Field(default=None, max_length=255)
    contact_email: Optional[str] = Field(default=None, max_length=255)
    contact_phone: Optional[str] = Field(default=None, max_length=50)
    notes: Optional[str] = None


class VenueRead(BaseModel):
    id: uuid.UUID
    tenant_id: uuid.UUID
    name: str
    type: VenueType
    address: Optional[str] = None
    city: Optional[str] = None
    capacity: Optional[int] = None
    setup_access_time: Optional[str] = None
    curfew: Optional[str] = None
    restrictions: List[str]
    contact_name: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
