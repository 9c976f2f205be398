"""
Authentication dependencies for FastAPI
"""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Dict
import uuid
import structlog

from stagehand.core.auth import decode_access_token

logger = structlog.get_logger(__name__)
security = HTTPBearer()


def _credentials_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_token_payload(
    credentials: HTTPAuthorizationCredentials = Depends(security)
) -> Dict:
    """Decode the bearer token once per request"""
    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise _credentials_exception()
    return payload


async def get_current_user_id(payload: Dict = Depends(get_token_payload)) -> uuid.UUID:
    """Get current user ID from JWT token"""
    try:
        user_id = uuid.UUID(payload["sub"])
    except (KeyError, ValueError):
        raise _credentials_exception()

    logger.debug(f"User authenticated: {user_id}")
    return user_id


async def get_tenant_id(payload: Dict = Depends(get_token_payload)) -> uuid.UUID:
    """Get tenant ID from JWT token"""
    try:
        return uuid.UUID(payload["tenant_id"])
    except (KeyError, ValueError):
        raise _credentials_exception()


async def get_user_role(payload: Dict = Depends(get_token_payload)) -> str:
    """Get user role from JWT token"""
    return payload.get("role", "")
