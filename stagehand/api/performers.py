"""
Performers API endpoints
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session
from typing import List, Optional
import uuid

from stagehand.core.config import get_settings
from stagehand.core.database import get_session
from stagehand.core.dependencies import get_tenant_id
from stagehand.core.permissions import Permission, require_permission
from stagehand.models.performer import PerformerType
from stagehand.schemas.performer import PerformerCreate, PerformerUpdate, PerformerRead
from stagehand.services import crud

router = APIRouter()
settings = get_settings()


@router.post(
    "/",
    response_model=PerformerRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_permission(Permission.CATALOG_EDIT))],
)
def create_performer(
    performer_in: PerformerCreate,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Create a new performer"""
    return crud.performer.create(session, tenant_id, performer_in)


@router.get("/", response_model=List[PerformerRead])
def list_performers(
    response: Response,
    type: Optional[PerformerType] = None,
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """List performers for tenant"""
    response.headers["X-Total-Count"] = str(crud.performer.count(session, tenant_id, type=type))
    return crud.performer.list(session, tenant_id, skip=skip, limit=limit, type=type)


@router.get("/{performer_id}", response_model=PerformerRead)
def get_performer(
    performer_id: uuid.UUID,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Get performer by ID"""
    return crud.performer.get(session, tenant_id, performer_id)


@router.patch(
    "/{performer_id}",
    response_model=PerformerRead,
    dependencies=[Depends(require_permission(Permission.CATALOG_EDIT))],
)
def update_performer(
    performer_id: uuid.UUID,
    performer_in: PerformerUpdate,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Update performer"""
    return crud.performer.update(session, tenant_id, performer_id, performer_in)


@router.delete(
    "/{performer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_permission(Permission.CATALOG_DELETE))],
)
def delete_performer(
    performer_id: uuid.UUID,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Delete performer together with its bookings"""
    crud.performer.delete(session, tenant_id, performer_id)
