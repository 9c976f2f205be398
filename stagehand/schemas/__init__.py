"""
Request and response schemas, one module per resource
"""

from stagehand.schemas.token import TokenResponse
from stagehand.schemas.user import UserCreate, UserLogin, UserResponse
from stagehand.schemas.tenant import TenantCreate, TenantRead, TenantUpdate
from stagehand.schemas.venue import VenueCreate, VenueRead, VenueUpdate
from stagehand.schemas.client import ClientCreate, ClientRead, ClientUpdate
from stagehand.schemas.performer import PerformerCreate, PerformerRead, PerformerUpdate
from stagehand.schemas.booking import BookingCreate, BookingRead, BookingStatusUpdate, BookingUpdate

__all__ = [
    "TokenResponse",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "TenantCreate",
    "TenantRead",
    "TenantUpdate",
    "VenueCreate",
    "VenueRead",
    "VenueUpdate",
    "ClientCreate",
    "ClientRead",
    "ClientUpdate",
    "PerformerCreate",
    "PerformerRead",
    "PerformerUpdate",
    "BookingCreate",
    "BookingRead",
    "BookingStatusUpdate",
    "BookingUpdate",
]
