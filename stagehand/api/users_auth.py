"""
User authentication API endpoints
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session, select
import structlog
import uuid

from stagehand.core.config import get_settings
from stagehand.core.database import get_session
from stagehand.core.dependencies import get_current_user_id, get_tenant_id
from stagehand.core.auth import create_access_token, hash_password, verify_password
from stagehand.models.tenant import Tenant
from stagehand.models.user import User, UserRole
from stagehand.schemas.token import TokenResponse
from stagehand.schemas.user import UserCreate, UserLogin, UserResponse
from stagehand.services.crud import commit_or_raise

logger = structlog.get_logger(__name__)
router = APIRouter()
settings = get_settings()


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register_user(
    user_data: UserCreate,
    session: Session = Depends(get_session)
):
    """Register a new user; the first user of a tenant becomes its owner"""
    tenant = session.exec(
        select(Tenant).where(Tenant.slug == user_data.tenant_slug)
    ).first()
    if not tenant:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Tenant not found"
        )

    existing_user = session.exec(
        select(User).where(User.email == user_data.email)
    ).first()
    if existing_user:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered"
        )

    has_users = session.exec(
        select(User.id).where(User.tenant_id == tenant.id)
    ).first() is not None

    new_user = User(
        email=user_data.email,
        password_hash=hash_password(user_data.password),
        name=user_data.name,
        role=UserRole.MEMBER if has_users else UserRole.OWNER,
        tenant_id=tenant.id,
    )
    commit_or_raise(session, new_user)

    logger.info(f"User registered: {new_user.id} as {new_user.role.value} of tenant {tenant.id}")
    return new_user


@router.post("/login", response_model=TokenResponse)
def login_user(
    login_data: UserLogin,
    session: Session = Depends(get_session)
):
    """Login user"""
    user = session.exec(
        select(User).where(User.email == login_data.email)
    ).first()

    if not user or not verify_password(login_data.password, user.password_hash):
        logger.warning(f"Failed login for {login_data.email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password"
        )

    logger.info(f"User logged in: {user.id}")

    access_token = create_access_token(
        user_id=user.id,
        tenant_id=user.tenant_id,
        role=user.role.value,
    )

    return TokenResponse(
        access_token=access_token,
        expires_in=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        user_id=str(user.id),
        tenant_id=str(user.tenant_id),
        role=user.role.value,
    )


@router.get("/me", response_model=UserResponse)
def get_current_user_info(
    user_id: uuid.UUID = Depends(get_current_user_id),
    tenant_id: uuid.UUID = Depends(get_tenant_id),
    session: Session = Depends(get_session)
):
    """Get current user info"""
    user = session.get(User, user_id)
    if not user or user.tenant_id != tenant_id:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return user
