"""
Users API endpoints
"""

from fastapi import APIRouter, Depends, Query, Response
from sqlmodel import Session
from typing import List, Optional
import uuid

from stagehand.core.config import get_settings
from stagehand.core.database import get_session
from stagehand.core.dependencies import get_tenant_id
from stagehand.core.permissions import Permission, require_permission
from stagehand.models.user import UserRole
from stagehand.schemas.user import UserResponse
from stagehand.services import crud

router = APIRouter()
settings = get_settings()


@router.get(
    "/",
    response_model=List[UserResponse],
    dependencies=[Depends(require_permission(Permission.USER_VIEW))],
)
def list_users(
    response: Response,
    role: Optional[UserRole] = None,
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """List users of the caller's tenant"""
    response.headers["X-Total-Count"] = str(crud.user.count(session, tenant_id, role=role))
    return crud.user.list(session, tenant_id, skip=skip, limit=limit, role=role)
