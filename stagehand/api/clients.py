"""
Clients API endpoints
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session
from typing import List, Optional
import uuid

from stagehand.core.config import get_settings
from stagehand.core.database import get_session
from stagehand.core.dependencies import get_tenant_id
from stagehand.core.permissions import Permission, require_permission
from stagehand.models.client import ClientType
from stagehand.schemas.client import ClientCreate, ClientUpdate, ClientRead
from stagehand.services import crud

router = APIRouter()
settings = get_settings()


@router.post(
    "/",
    response_model=ClientRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_permission(Permission.CATALOG_EDIT))],
)
def create_client(
    client_in: ClientCreate,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Create a new client"""
    return crud.client.create(session, tenant_id, client_in)


@router.get("/", response_model=List[ClientRead])
def list_clients(
    response: Response,
    client_type: Optional[ClientType] = None,
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """List clients for tenant"""
    response.headers["X-Total-Count"] = str(crud.client.count(session, tenant_id, client_type=client_type))
    return crud.client.list(session, tenant_id, skip=skip, limit=limit, client_type=client_type)


@router.get("/{client_id}", response_model=ClientRead)
def get_client(
    client_id: uuid.UUID,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Get client by ID"""
    return crud.client.get(session, tenant_id, client_id)


@router.patch(
    "/{client_id}",
    response_model=ClientRead,
    dependencies=[Depends(require_permission(Permission.CATALOG_EDIT))],
)
def update_client(
    client_id: uuid.UUID,
    client_in: ClientUpdate,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Update client"""
    return crud.client.update(session, tenant_id, client_id, client_in)


@router.delete(
    "/{client_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_permission(Permission.CATALOG_DELETE))],
)
def delete_client(
    client_id: uuid.UUID,
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Delete client; their events are kept without a client"""
    crud.client.delete(session, tenant_id, client_id)
