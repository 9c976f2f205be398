"""
Bookings API endpoints
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlmodel import Session
from typing import List, Optional
import structlog
import uuid

from stagehand.core.config import get_settings
from stagehand.core.database import get_session
from stagehand.core.dependencies import get_tenant_id, get_user_role
from stagehand.core.permissions import Permission, get_permissions_for_role, has_permission, require_permission
from stagehand.models.booking import BookingStatus
from stagehand.schemas.booking import BookingCreate, BookingUpdate, BookingStatusUpdate, BookingRead
from stagehand.services import crud

logger = structlog.get_logger(__name__)
router = APIRouter()
settings = get_settings()

# Changing these needs Permission.BOOKING_FINANCE
FINANCE_FIELDS = {"agreed_rate", "deposit", "paid_amount"}


@router.post(
    "/",
    response_model=BookingRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_permission(Permission.BOOKING_EDIT))],
)
def create_booking(
    booking_in: BookingCreate,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Book a performer for an event"""
    return crud.booking.create(session, tenant_id, booking_in)


@router.get("/", response_model=List[BookingRead])
def list_bookings(
    response: Response,
    event_id: Optional[uuid.UUID] = None,
    performer_id: Optional[uuid.UUID] = None,
    status: Optional[BookingStatus] = None,
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """List bookings for tenant"""
    filters = dict(event_id=event_id, performer_id=performer_id, status=status)
    response.headers["X-Total-Count"] = str(crud.booking.count(session, tenant_id, **filters))
    return crud.booking.list(session, tenant_id, skip=skip, limit=limit, **filters)


@router.get("/{booking_id}", response_model=BookingRead)
def get_booking(
    booking_id: uuid.UUID,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Get booking by ID"""
    return crud.booking.get(session, tenant_id, booking_id)


@router.patch(
    "/{booking_id}",
    response_model=BookingRead,
    dependencies=[Depends(require_permission(Permission.BOOKING_EDIT))],
)
def update_booking(
    booking_id: uuid.UUID,
    booking_in: BookingUpdate,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    role: str = Depends(get_user_role),
    session: Session = Depends(get_session)
):
    """Update booking; money fields need finance permission"""
    touched = FINANCE_FIELDS & booking_in.model_dump(exclude_unset=True).keys()
    if touched and not has_permission(Permission.BOOKING_FINANCE, get_permissions_for_role(role)):
        logger.warning(f"Finance update denied on booking {booking_id} for role {role}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Permission required: {Permission.BOOKING_FINANCE.value}"
        )
    return crud.booking.update(session, tenant_id, booking_id, booking_in)


@router.post(
    "/{booking_id}/status",
    response_model=BookingRead,
    dependencies=[Depends(require_permission(Permission.BOOKING_EDIT))],
)
def change_booking_status(
    booking_id: uuid.UUID,
    status_in: BookingStatusUpdate,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Confirm, complete or cancel a booking"""
    return crud.booking.set_status(session, tenant_id, booking_id, status_in.status)


@router.delete(
    "/{booking_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_permission(Permission.BOOKING_DELETE))],
)
def delete_booking(
    booking_id: uuid.UUID,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Delete booking and release the performer's booking count"""
    crud.booking.delete(session, tenant_id, booking_id)
