"""
Pydantic schemas for bookings
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal
import uuid

from stagehand.models.booking import BookingStatus
from stagehand.schemas.event import TIME_PATTERN


class BookingCreate(BaseModel):
    event_id: uuid.UUID
    performer_id: uuid.UUID
    agreed_rate: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    deposit: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    paid_amount: Decimal = Field(default=Decimal("0.00"), ge=0, max_digits=12, decimal_places=2)
    call_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    setup_start: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    performance_start: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    performance_end: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    load_out: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    contract_signed: bool = False
    contract_url: Optional[str] = Field(default=None, max_length=500)
    notes: Optional[str] = None


class BookingUpdate(BaseModel):
    """Partial update; event and performer are fixed once booked"""
    agreed_rate: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    deposit: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    paid_amount: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    call_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    setup_start: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    performance_start: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    performance_end: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    load_out: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    contract_signed: Optional[bool] = None
    contract_url: Optional[str] = Field(default=None, max_length=500)
    notes: Optional[str] = None


class BookingStatusUpdate(BaseModel):
    status: BookingStatus


class BookingRead(BaseModel):
    id: uuid.UUID
    tenant_id: uuid.UUID
    event_id: uuid.UUID
    performer_id: uuid.UUID
    status: BookingStatus
    call_time: Optional[str] = None
    setup_start: Optional[str] = None
    performance_start: Optional[str] = None
    performance_end: Optional[str] = None
    load_out: Optional[str] = None
    agreed_rate: Decimal
    deposit: Optional[Decimal] = None
    paid_amount: Decimal
    contract_signed: bool
    contract_url: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
