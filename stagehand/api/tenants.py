"""
Tenant API endpoints
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session
import structlog
import uuid

from stagehand.core.clock import utcnow
from stagehand.core.database import get_session
from stagehand.core.dependencies import get_tenant_id
from stagehand.core.errors import RecordNotFoundError
from stagehand.core.permissions import Permission, require_permission
from stagehand.models.tenant import Tenant
from stagehand.schemas.tenant import TenantCreate, TenantUpdate, TenantRead
from stagehand.services.crud import commit_or_raise

logger = structlog.get_logger(__name__)
router = APIRouter()


def _own_tenant(session: Session, tenant_id: uuid.UUID, caller_tenant_id: uuid.UUID) -> Tenant:
    # Other tenants are indistinguishable from missing ones
    tenant = session.get(Tenant, tenant_id)
    if tenant is None or tenant.id != caller_tenant_id:
        raise RecordNotFoundError("Tenant", tenant_id)
    return tenant


@router.post("/", response_model=TenantRead, status_code=status.HTTP_201_CREATED)
def create_tenant(
    tenant_in: TenantCreate,
    session: Session = Depends(get_session)
):
    """Create a new tenant (public signup)"""
    tenant = Tenant(**tenant_in.model_dump())
    commit_or_raise(session, tenant)
    logger.info(f"Tenant created: {tenant.id} ({tenant.slug})")
    return tenant


@router.get("/{tenant_id}", response_model=TenantRead)
def get_tenant(
    tenant_id: uuid.UUID,
    caller_tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Get the caller's own tenant"""
    return _own_tenant(session, tenant_id, caller_tenant_id)


@router.put(
    "/{tenant_id}",
    response_model=TenantRead,
    dependencies=[Depends(require_permission(Permission.TENANT_MANAGE))],
)
def update_tenant(
    tenant_id: uuid.UUID,
    tenant_update: TenantUpdate,
    caller_tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Update tenant"""
    db_tenant = _own_tenant(session, tenant_id, caller_tenant_id)

    tenant_data = tenant_update.model_dump(exclude_unset=True)
    for key, value in tenant_data.items():
        setattr(db_tenant, key, value)

    db_tenant.updated_at = utcnow()
    commit_or_raise(session, db_tenant)
    logger.info(f"Tenant updated: {tenant_id}")
    return db_tenant
