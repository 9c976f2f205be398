"""
Events API endpoints
Event CRUD, status changes, tasks, and the timeline and budget planners
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlmodel import Session
from typing import Any, Dict, List, Optional
from datetime import datetime
import structlog
import uuid

from stagehand.core.config import get_settings
from stagehand.core.clock import utcnow
from stagehand.core.database import get_session
from stagehand.core.dependencies import get_tenant_id, get_current_user_id
from stagehand.core.errors import InvalidTransitionError
from stagehand.core.permissions import Permission, require_permission
from stagehand.models.event import EventStatus, EventType
from stagehand.models.event_task import TaskStatus
from stagehand.schemas.event import (
    BudgetPlanRequest,
    BudgetSummary,
    EventCreate,
    EventRead,
    EventStatusUpdate,
    EventTaskCreate,
    EventTaskRead,
    EventTaskUpdate,
    EventUpdate,
    TimelineRequest,
)
from stagehand.services import crud
from stagehand.services.budget_optimizer import optimize_budget
from stagehand.services.timeline_optimizer import (
    Milestone,
    TimelineConstraints,
    build_timeline_input,
    generate_timeline,
    optimize_performer_order,
)

logger = structlog.get_logger(__name__)
router = APIRouter()
settings = get_settings()


# ============================================================================
# Events
# ============================================================================

@router.post(
    "/",
    response_model=EventRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_permission(Permission.EVENT_EDIT))],
)
def create_event(
    event_in: EventCreate,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    current_user_id: uuid.UUID = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Create a new event owned by the calling user"""
    return crud.event.create(session, tenant_id, event_in, created_by_id=current_user_id)


@router.get("/", response_model=List[EventRead])
def list_events(
    response: Response,
    status: Optional[EventStatus] = None,
    type: Optional[EventType] = None,
    venue_id: Optional[uuid.UUID] = None,
    client_id: Optional[uuid.UUID] = None,
    date_from: Optional[datetime] = None,
    date_to: Optional[datetime] = None,
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """List events for tenant, soonest first"""
    filters = dict(
        date_from=date_from,
        date_to=date_to,
        status=status,
        type=type,
        venue_id=venue_id,
        client_id=client_id,
    )
    response.headers["X-Total-Count"] = str(crud.event.count(session, tenant_id, **filters))
    return crud.event.list(session, tenant_id, skip=skip, limit=limit, **filters)


@router.get("/{event_id}", response_model=EventRead)
def get_event(
    event_id: uuid.UUID,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Get event by ID"""
    return crud.event.get(session, tenant_id, event_id)


@router.patch(
    "/{event_id}",
    response_model=EventRead,
    dependencies=[Depends(require_permission(Permission.EVENT_EDIT))],
)
def update_event(
    event_id: uuid.UUID,
    event_in: EventUpdate,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Update event details (not status)"""
    return crud.event.update(session, tenant_id, event_id, event_in)


@router.post(
    "/{event_id}/status",
    response_model=EventRead,
    dependencies=[Depends(require_permission(Permission.EVENT_EDIT))],
)
def change_event_status(
    event_id: uuid.UUID,
    status_in: EventStatusUpdate,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Move an event through its lifecycle"""
    return crud.event.set_status(session, tenant_id, event_id, status_in.status)


@router.delete(
    "/{event_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_permission(Permission.EVENT_DELETE))],
)
def delete_event(
    event_id: uuid.UUID,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Delete event together with its bookings and tasks"""
    crud.event.delete(session, tenant_id, event_id)


# ============================================================================
# Tasks
# ============================================================================

@router.get("/{event_id}/tasks", response_model=List[EventTaskRead])
def list_event_tasks(
    event_id: uuid.UUID,
    status: Optional[TaskStatus] = None,
    overdue: Optional[bool] = None,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """List the event's tasks, optionally only those past due"""
    event = crud.event.get(session, tenant_id, event_id)
    return crud.event_task.list(session, event, status=status, overdue=overdue)


@router.post(
    "/{event_id}/tasks",
    response_model=EventTaskRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_permission(Permission.TASK_EDIT))],
)
def create_event_task(
    event_id: uuid.UUID,
    task_in: EventTaskCreate,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Add a task to the event"""
    event = crud.event.get(session, tenant_id, event_id)
    return crud.event_task.create(session, event, task_in)


@router.get("/{event_id}/tasks/{task_id}", response_model=EventTaskRead)
def get_event_task(
    event_id: uuid.UUID,
    task_id: uuid.UUID,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    event = crud.event.get(session, tenant_id, event_id)
    return crud.event_task.get(session, event, task_id)


@router.patch(
    "/{event_id}/tasks/{task_id}",
    response_model=EventTaskRead,
    dependencies=[Depends(require_permission(Permission.TASK_EDIT))],
)
def update_event_task(
    event_id: uuid.UUID,
    task_id: uuid.UUID,
    task_in: EventTaskUpdate,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Update a task; completing it stamps completed_at"""
    event = crud.event.get(session, tenant_id, event_id)
    return crud.event_task.update(session, event, task_id, task_in)


@router.delete(
    "/{event_id}/tasks/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_permission(Permission.TASK_EDIT))],
)
def delete_event_task(
    event_id: uuid.UUID,
    task_id: uuid.UUID,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    event = crud.event.get(session, tenant_id, event_id)
    crud.event_task.delete(session, event, task_id)


# ============================================================================
# Planning
# ============================================================================

@router.post(
    "/{event_id}/timeline",
    dependencies=[Depends(require_permission(Permission.PLANNING_RUN))],
)
def generate_event_timeline(
    event_id: uuid.UUID,
    request: TimelineRequest,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
) -> Dict[str, Any]:
    """
    Generate the event's run sheet from its active bookings.

    The timeline is stored on the event; call-time markers are written
    back onto the bookings unless apply_to_bookings is false.
    """
    event = crud.event.get(session, tenant_id, event_id)
    if not event.is_editable():
        raise InvalidTransitionError(f"Cannot plan a {event.status.value} event")

    bookings = crud.event.active_bookings(session, event)
    data = build_timeline_input(
        event,
        event.venue,
        bookings,
        milestones=[Milestone(**m.model_dump()) for m in request.milestones],
        constraints=TimelineConstraints(**request.constraints.model_dump()),
    )

    order = None
    if request.scored_order:
        order = optimize_performer_order(data.performers, event.type.value)
    timeline = generate_timeline(data, order=order)

    event.timeline = timeline
    event.updated_at = utcnow()
    session.add(event)

    if request.apply_to_bookings:
        call_times = {entry["booking_id"]: entry for entry in timeline["performer_call_times"]}
        for booking in bookings:
            entry = call_times.get(str(booking.id))
            if entry:
                booking.apply_schedule(entry)
                session.add(booking)

    session.commit()
    logger.info(f"Timeline generated for event {event_id} ({len(bookings)} bookings)")
    return timeline


@router.post(
    "/{event_id}/budget-plan",
    dependencies=[Depends(require_permission(Permission.PLANNING_RUN))],
)
def generate_budget_plan(
    event_id: uuid.UUID,
    request: Optional[BudgetPlanRequest] = None,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
) -> Dict[str, Any]:
    """Split the event budget into categories and line items"""
    event = crud.event.get(session, tenant_id, event_id)
    request = request or BudgetPlanRequest()

    total_budget = request.total_budget or event.total_budget
    guest_count = request.guest_count or event.guest_count
    if not total_budget or not guest_count:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Event needs a total_budget and guest_count to plan a budget"
        )

    return optimize_budget(total_budget, event.type, guest_count, event_name=event.name)


@router.get("/{event_id}/budget", response_model=BudgetSummary)
def get_event_budget(
    event_id: uuid.UUID,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Booked and paid amounts against the event budget"""
    return crud.event.budget_summary(session, tenant_id, event_id)
