"""
Unit tests for RBAC permission system
"""

import pytest
from fastapi import HTTPException

from stagehand.core.permissions import (
    Permission,
    get_permissions_for_role,
    has_permission,
    require_permission
)


def test_get_permissions_for_role():
    """Test permission retrieval for all roles"""
    owner_perms = get_permissions_for_role("owner")
    assert owner_perms == set(Permission)

    admin_perms = get_permissions_for_role("admin")
    assert Permission.EVENT_DELETE in admin_perms
    assert Permission.BOOKING_FINANCE in admin_perms
    assert Permission.TENANT_MANAGE not in admin_perms

    member_perms = get_permissions_for_role("member")
    assert Permission.EVENT_EDIT in member_perms
    assert Permission.BOOKING_EDIT in member_perms
    assert Permission.EVENT_DELETE not in member_perms
    assert Permission.BOOKING_FINANCE not in member_perms
    assert Permission.USER_VIEW not in member_perms


def test_unknown_role_has_no_permissions():
    assert get_permissions_for_role("waiter") == set()
    assert get_permissions_for_role("OWNER") == set(Permission)


def test_has_permission():
    member_perms = get_permissions_for_role("member")
    assert has_permission(Permission.PLANNING_RUN, member_perms)
    assert not has_permission(Permission.CATALOG_DELETE, member_perms)


@pytest.mark.asyncio
async def test_require_permission_dependency():
    checker = require_permission(Permission.EVENT_DELETE)
    assert await checker(role="admin") is True

    with pytest.raises(HTTPException) as exc_info:
        await checker(role="member")
    assert exc_info.value.status_code == 403
    assert exc_info.value.detail == "Permission required: event:delete"


def test_member_cannot_delete_event(client, event, member_headers):
    response = client.delete(f"/api/v1/events/{event.id}", headers=member_headers)
    assert response.status_code == 403


def test_member_cannot_list_users(client, member_headers, owner_headers):
    assert client.get("/api/v1/users/", headers=member_headers).status_code == 403

    response = client.get("/api/v1/users/", headers=owner_headers)
    assert response.status_code == 200
    assert {u["email"] for u in response.json()} == {"owner@example.com", "member@example.com"}


def test_member_cannot_change_booking_money(client, booking, member_headers, owner_headers):
    response = client.patch(
        f"/api/v1/bookings/{booking.id}",
        json={"paid_amount": "400.00"},
        headers=member_headers,
    )
    assert response.status_code == 403

    response = client.patch(
        f"/api/v1/bookings/{booking.id}",
        json={"notes": "Needs a dressing room"},
        headers=member_headers,
    )
    assert response.status_code == 200

    response = client.patch(
        f"/api/v1/bookings/{booking.id}",
        json={"paid_amount": "400.00"},
        headers=owner_headers,
    )
    assert response.status_code == 200
    assert response.json()["paid_amount"] == "400.00"
