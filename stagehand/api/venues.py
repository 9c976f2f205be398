"""
Venues API endpoints
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session
from typing import List, Optional
import uuid

from stagehand.core.config import get_settings
from stagehand.core.database import get_session
from stagehand.core.dependencies import get_tenant_id
from stagehand.core.permissions import Permission, require_permission
from stagehand.models.venue import VenueType
from stagehand.schemas.venue import VenueCreate, VenueUpdate, VenueRead
from stagehand.services import crud

router = APIRouter()
settings = get_settings()


@router.post(
    "/",
    response_model=VenueRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_permission(Permission.CATALOG_EDIT))],
)
def create_venue(
    venue_in: VenueCreate,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Create a new venue"""
    return crud.venue.create(session, tenant_id, venue_in)


@router.get("/", response_model=List[VenueRead])
def list_venues(
    response: Response,
    type: Optional[VenueType] = None,
    city: Optional[str] = None,
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """List venues for tenant"""
    response.headers["X-Total-Count"] = str(crud.venue.count(session, tenant_id, type=type, city=city))
    return crud.venue.list(session, tenant_id, skip=skip, limit=limit, type=type, city=city)


@router.get("/{venue_id}", response_model=VenueRead)
def get_venue(
    venue_id: uuid.UUID,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Get venue by ID"""
    return crud.venue.get(session, tenant_id, venue_id)


@router.patch(
    "/{venue_id}",
    response_model=VenueRead,
    dependencies=[Depends(require_permission(Permission.CATALOG_EDIT))],
)
def update_venue(
    venue_id: uuid.UUID,
    venue_in: VenueUpdate,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Update venue"""
    return crud.venue.update(session, tenant_id, venue_id, venue_in)


@router.delete(
    "/{venue_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_permission(Permission.CATALOG_DELETE))],
)
def delete_venue(
    venue_id: uuid.UUID,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Delete venue; events held there keep their other details"""
    crud.venue.delete(session, tenant_id, venue_id)
