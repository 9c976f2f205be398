"""
RBAC (Role-Based Access Control) permission system
"""

from enum import Enum
from typing import Set
from fastapi import Depends, HTTPException, status

from stagehand.core.dependencies import get_user_role


class Permission(str, Enum):
    """Permission definitions"""
    # Tenant permissions
    TENANT_MANAGE = "tenant:manage"
    USER_VIEW = "user:view"

    # Event permissions
    EVENT_EDIT = "event:edit"
    EVENT_DELETE = "event:delete"
    TASK_EDIT = "task:edit"
    PLANNING_RUN = "planning:run"

    # Catalog permissions (venues, performers, clients)
    CATALOG_EDIT = "catalog:edit"
    CATALOG_DELETE = "catalog:delete"

    # Booking permissions
    BOOKING_EDIT = "booking:edit"
    BOOKING_DELETE = "booking:delete"
    BOOKING_FINANCE = "booking:finance"


# Role permission mapping
ROLE_PERMISSIONS = {
    "owner": set(Permission),
    "admin": {
        # Admins manage everything except the tenant record itself
        Permission.USER_VIEW,
        Permission.EVENT_EDIT,
        Permission.EVENT_DELETE,
        Permission.TASK_EDIT,
        Permission.PLANNING_RUN,
        Permission.CATALOG_EDIT,
        Permission.CATALOG_DELETE,
        Permission.BOOKING_EDIT,
        Permission.BOOKING_DELETE,
        Permission.BOOKING_FINANCE,
    },
    "member": {
        # Members plan events but cannot delete or touch money
        Permission.EVENT_EDIT,
        Permission.TASK_EDIT,
        Permission.PLANNING_RUN,
        Permission.CATALOG_EDIT,
        Permission.BOOKING_EDIT,
    },
}


def get_permissions_for_role(role: str) -> Set[Permission]:
    """Get permissions for a given role"""
    return ROLE_PERMISSIONS.get(role.lower(), set())


def has_permission(required_permission: Permission, user_permissions: Set[Permission]) -> bool:
    """Check if user has required permission"""
    return required_permission in user_permissions


def require_permission(required_permission: Permission):
    """Dependency factory to check permissions"""
    async def check_permission(role: str = Depends(get_user_role)) -> bool:
        if not has_permission(required_permission, get_permissions_for_role(role)):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permission required: {required_permission.value}",
            )
        return True
    return check_permission
