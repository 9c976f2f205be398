"""
Integration tests for tenant isolation

Users only ever see their own tenant's rows; another tenant's rows behave
exactly like rows that do not exist.
"""

import pytest

from stagehand.models import UserRole


def test_user_can_access_own_tenant(client, tenant, owner_headers):
    response = client.get(f"/api/v1/tenants/{tenant.id}", headers=owner_headers)
    assert response.status_code == 200
    assert response.json()["slug"] == "ember-events"


def test_other_tenant_is_not_found(client, tenant, other_headers):
    response = client.get(f"/api/v1/tenants/{tenant.id}", headers=other_headers)
    assert response.status_code == 404


def test_cross_tenant_reads_return_not_found(client, event, venue, booking, other_headers):
    for url in (
        f"/api/v1/events/{event.id}",
        f"/api/v1/venues/{venue.id}",
        f"/api/v1/bookings/{booking.id}",
        f"/api/v1/performers/{booking.performer_id}",
        f"/api/v1/events/{event.id}/tasks",
        f"/api/v1/events/{event.id}/budget",
    ):
        assert client.get(url, headers=other_headers).status_code == 404, url


def test_cross_tenant_lists_are_empty(client, event, booking, other_headers):
    for url in ("/api/v1/events/", "/api/v1/venues/", "/api/v1/bookings/", "/api/v1/performers/"):
        response = client.get(url, headers=other_headers)
        assert response.status_code == 200
        assert response.json() == [], url


def test_cross_tenant_writes_are_rejected(client, db, event, other_headers):
    response = client.patch(f"/api/v1/events/{event.id}", json={"name": "Hijacked"}, headers=other_headers)
    assert response.status_code == 404
    assert client.delete(f"/api/v1/events/{event.id}", headers=other_headers).status_code == 404

    db.refresh(event)
    assert event.name == "Annual Gala"


def test_cannot_reference_other_tenants_rows(client, event, magician, other_headers):
    # Booking the first tenant's performer for the first tenant's event from outside
    response = client.post(
        "/api/v1/bookings/",
        json={"event_id": str(event.id), "performer_id": str(magician.id), "agreed_rate": "10.00"},
        headers=other_headers,
    )
    assert response.status_code == 404


def test_cannot_attach_other_tenants_venue(client, venue, other_headers):
    response = client.post("/api/v1/events/", json={
        "name": "Pop-up",
        "date": "2026-10-01T00:00:00",
        "start_time": "12:00",
        "end_time": "14:00",
        "venue_id": str(venue.id),
    }, headers=other_headers)
    assert response.status_code == 404
    assert response.json()["detail"] == "Venue not found"


def test_tenant_update_is_owner_only(client, tenant, owner_headers, user_factory, headers_for):
    admin = user_factory(tenant, "admin@example.com", UserRole.ADMIN)

    response = client.put(f"/api/v1/tenants/{tenant.id}", json={"name": "Ember"}, headers=headers_for(admin))
    assert response.status_code == 403

    response = client.put(
        f"/api/v1/tenants/{tenant.id}",
        json={"name": "Ember", "subscription_plan": "professional"},
        headers=owner_headers,
    )
    assert response.status_code == 200
    assert response.json()["subscription_plan"] == "professional"


def test_public_tenant_signup(client):
    response = client.post("/api/v1/tenants/", json={"name": "Night Owl", "slug": "night-owl"})
    assert response.status_code == 201
    assert response.json()["subscription_status"] == "trialing"

    duplicate = client.post("/api/v1/tenants/", json={"name": "Other Owl", "slug": "night-owl"})
    assert duplicate.status_code == 409
    assert duplicate.json()["error"] == "conflict_error"


@pytest.mark.parametrize("slug", ["No Spaces", "UPPER", "ab", "-dash-first"])
def test_tenant_slug_is_validated(client, slug):
    assert client.post("/api/v1/tenants/", json={"name": "Bad", "slug": slug}).status_code == 422
