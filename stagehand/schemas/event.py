"""
Pydantic schemas for events and event tasks
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime
from decimal import Decimal
import uuid

from stagehand.core.clock import as_utc
from stagehand.models.event import EventType, EventStatus
from stagehand.models.event_task import TaskStatus, TaskPriority

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


# ============================================================================
# Event Schemas
# ============================================================================

class EventCreate(BaseModel):
    """New events always start in planning"""
    name: str = Field(..., min_length=1, max_length=255)
    type: EventType = EventType.CORPORATE
    date: datetime
    start_time: str = Field(..., pattern=TIME_PATTERN)
    end_time: str = Field(..., pattern=TIME_PATTERN)
    guest_count: Optional[int] = Field(default=None, ge=0)
    description: Optional[str] = None
    notes: Optional[str] = None
    venue_id: Optional[uuid.UUID] = None
    venue_custom: Optional[str] = Field(default=None, max_length=500)
    client_id: Optional[uuid.UUID] = None
    total_budget: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    spent_amount: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)

    @field_validator("date")
    @classmethod
    def date_in_utc(cls, v):
        return as_utc(v)


class EventUpdate(BaseModel):
    """Partial update; status changes go through the status endpoint"""
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    type: Optional[EventType] = None
    date: Optional[datetime] = None
    start_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    end_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    guest_count: Optional[int] = Field(default=None, ge=0)
    description: Optional[str] = None
    notes: Optional[str] = None
    venue_id: Optional[uuid.UUID] = None
    venue_custom: Optional[str] = Field(default=None, max_length=500)
    client_id: Optional[uuid.UUID] = None
    total_budget: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    spent_amount: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)

    @field_validator("date")
    @classmethod
    def date_in_utc(cls, v):
        return as_utc(v)


class EventStatusUpdate(BaseModel):
    status: EventStatus


class EventRead(BaseModel):
    id: uuid.UUID
    tenant_id: uuid.UUID
    name: str
    type: EventType
    status: EventStatus
    date: datetime
    start_time: str
    end_time: str
    guest_count: Optional[int] = None
    description: Optional[str] = None
    notes: Optional[str] = None
    venue_id: Optional[uuid.UUID] = None
    venue_custom: Optional[str] = None
    client_id: Optional[uuid.UUID] = None
    total_budget: Optional[Decimal] = None
    spent_amount: Optional[Decimal] = None
    timeline: Optional[dict] = None
    created_by_id: uuid.UUID
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class BudgetSummary(BaseModel):
    event_id: uuid.UUID
    total_budget: Optional[Decimal]
    spent_amount: Optional[Decimal]
    committed: Decimal
    paid: Decimal
    outstanding: Decimal
    remaining: Optional[Decimal]
    booking_count: int


# ============================================================================
# Event Task Schemas
# ============================================================================

class EventTaskCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[datetime] = None
    assigned_to: Optional[str] = Field(default=None, max_length=255)

    @field_validator("due_date")
    @classmethod
    def due_date_in_utc(cls, v):
        return as_utc(v)


class EventTaskUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[datetime] = None
    assigned_to: Optional[str] = Field(default=None, max_length=255)

    @field_validator("due_date")
    @classmethod
    def due_date_in_utc(cls, v):
        return as_utc(v)


class EventTaskRead(BaseModel):
    id: uuid.UUID
    event_id: uuid.UUID
    title: str
    description: Optional[str] = None
    status: TaskStatus
    priority: TaskPriority
    due_date: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    assigned_to: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# ============================================================================
# Planning Schemas
# ============================================================================

class MilestoneIn(BaseModel):
    name: str
    time: str = Field(..., pattern=TIME_PATTERN)
    duration: Optional[int] = Field(default=None, ge=0)
    is_flexible: bool = False


class TimelineConstraintsIn(BaseModel):
    breaks_between_acts: int = Field(default=10, ge=0)
    simultaneous_performers_max: int = Field(default=2, ge=1)
    weather_sensitive: bool = False


class TimelineRequest(BaseModel):
    milestones: List[MilestoneIn] = []
    constraints: TimelineConstraintsIn = TimelineConstraintsIn()
    apply_to_bookings: bool = True
    scored_order: bool = False


class BudgetPlanRequest(BaseModel):
    """Overrides for the event's own budget figures"""
    total_budget: Optional[Decimal] = Field(default=None, gt=0)
    guest_count: Optional[int] = Field(default=None, gt=0)
