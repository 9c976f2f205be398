"""
Login token schema
"""

from pydantic import BaseModel


class TokenResponse(BaseModel):
    """Bearer token plus the claims the frontend needs up front"""
    access_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds
    user_id: str
    tenant_id: str
    role: str
