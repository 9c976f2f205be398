"""
API tests for bookings and the performer/venue/client catalog
"""

import pytest

from stagehand.models import Performer


class TestBookings:

    def _book(self, client, headers, event, performer, rate="1200.00"):
        return client.post(
            "/api/v1/bookings/",
            json={"event_id": str(event.id), "performer_id": str(performer.id), "agreed_rate": rate},
            headers=headers,
        )

    def test_create_increments_performer_count(self, client, db, owner_headers, event, fire_performer):
        response = self._book(client, owner_headers, event, fire_performer)
        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "pending"
        assert body["paid_amount"] == "0.00"

        performer = client.get(f"/api/v1/performers/{fire_performer.id}", headers=owner_headers).json()
        assert performer["total_bookings"] == 1

    def test_delete_decrements_performer_count(self, client, db, owner_headers, booking, magician):
        assert client.delete(f"/api/v1/bookings/{booking.id}", headers=owner_headers).status_code == 204
        db.expire_all()
        assert db.get(Performer, magician.id).total_bookings == 0

    def test_member_cannot_delete(self, client, member_headers, booking):
        assert client.delete(f"/api/v1/bookings/{booking.id}", headers=member_headers).status_code == 403

    def test_status_flow(self, client, owner_headers, booking):
        url = f"/api/v1/bookings/{booking.id}/status"
        assert client.post(url, json={"status": "completed"}, headers=owner_headers).status_code == 409
        assert client.post(url, json={"status": "confirmed"}, headers=owner_headers).json()["status"] == "confirmed"
        assert client.post(url, json={"status": "completed"}, headers=owner_headers).json()["status"] == "completed"
        assert client.post(url, json={"status": "cancelled"}, headers=owner_headers).status_code == 409

    def test_cancelled_booking_is_read_only(self, client, owner_headers, booking):
        url = f"/api/v1/bookings/{booking.id}"
        assert client.patch(url, json={"notes": "Needs a green room"}, headers=owner_headers).status_code == 200

        client.post(f"{url}/status", json={"status": "cancelled"}, headers=owner_headers)
        response = client.patch(url, json={"notes": "Rebooked"}, headers=owner_headers)
        assert response.status_code == 409
        assert response.json()["error"] == "invalid_transition"
        assert client.get(url, headers=owner_headers).json()["notes"] == "Needs a green room"

    def test_list_filters(self, client, owner_headers, event, booking, fire_performer):
        self._book(client, owner_headers, event, fire_performer)

        by_performer = client.get(
            "/api/v1/bookings/", params={"performer_id": str(fire_performer.id)}, headers=owner_headers
        ).json()
        assert len(by_performer) == 1
        assert by_performer[0]["performer_id"] == str(fire_performer.id)

        by_event = client.get("/api/v1/bookings/", params={"event_id": str(event.id)}, headers=owner_headers).json()
        assert len(by_event) == 2

        pending = client.get("/api/v1/bookings/", params={"status": "confirmed"}, headers=owner_headers).json()
        assert pending == []

    def test_list_reports_total_count(self, client, owner_headers, event, booking, fire_performer):
        self._book(client, owner_headers, event, fire_performer)

        response = client.get("/api/v1/bookings/", params={"limit": 1}, headers=owner_headers)
        assert len(response.json()) == 1
        assert response.headers["X-Total-Count"] == "2"

        response = client.get(
            "/api/v1/bookings/", params={"performer_id": str(fire_performer.id)}, headers=owner_headers
        )
        assert response.headers["X-Total-Count"] == "1"

    def test_negative_rate_is_rejected(self, client, owner_headers, event, fire_performer):
        assert self._book(client, owner_headers, event, fire_performer, rate="-1").status_code == 422

    def test_booking_closed_event(self, client, owner_headers, event, fire_performer):
        client.post(f"/api/v1/events/{event.id}/status", json={"status": "cancelled"}, headers=owner_headers)
        response = self._book(client, owner_headers, event, fire_performer)
        assert response.status_code == 409


class TestCatalog:

    def test_venue_crud(self, client, member_headers, owner_headers):
        response = client.post("/api/v1/venues/", json={
            "name": "Quinta do Lago",
            "type": "outdoor",
            "city": "Sintra",
            "capacity": 250,
            "restrictions": ["No open flames after 22:00"],
        }, headers=member_headers)
        assert response.status_code == 201
        venue_id = response.json()["id"]

        response = client.patch(f"/api/v1/venues/{venue_id}", json={"curfew": "23:00"}, headers=member_headers)
        assert response.json()["curfew"] == "23:00"
        assert response.json()["restrictions"] == ["No open flames after 22:00"]

        listed = client.get("/api/v1/venues/", params={"type": "outdoor"}, headers=member_headers).json()
        assert [v["id"] for v in listed] == [venue_id]

        assert client.delete(f"/api/v1/venues/{venue_id}", headers=member_headers).status_code == 403
        assert client.delete(f"/api/v1/venues/{venue_id}", headers=owner_headers).status_code == 204

    def test_deleting_venue_detaches_events(self, client, owner_headers, event, venue):
        assert client.delete(f"/api/v1/venues/{venue.id}", headers=owner_headers).status_code == 204
        response = client.get(f"/api/v1/events/{event.id}", headers=owner_headers)
        assert response.status_code == 200
        assert response.json()["venue_id"] is None

    def test_performer_crud(self, client, owner_headers):
        response = client.post("/api/v1/performers/", json={
            "name": "Circo Sol",
            "type": "circus",
            "performance_time": 25,
            "standard_rate": "950.00",
            "requirements": {"ceiling_height": 8},
        }, headers=owner_headers)
        assert response.status_code == 201
        body = response.json()
        assert body["total_bookings"] == 0
        assert body["setup_time"] == 30

        listed = client.get("/api/v1/performers/", params={"type": "magic"}, headers=owner_headers).json()
        assert listed == []

    def test_deleting_performer_removes_bookings(self, client, owner_headers, booking, magician):
        assert client.delete(f"/api/v1/performers/{magician.id}", headers=owner_headers).status_code == 204
        assert client.get(f"/api/v1/bookings/{booking.id}", headers=owner_headers).status_code == 404

    def test_client_crud(self, client, owner_headers):
        response = client.post("/api/v1/clients/", json={
            "name": "Helena Sousa",
            "email": "helena@example.com",
            "client_type": "corporate",
            "company": "Sousa & Filhos",
            "tags": ["repeat"],
        }, headers=owner_headers)
        assert response.status_code == 201
        client_id = response.json()["id"]

        listed = client.get("/api/v1/clients/", params={"client_type": "individual"}, headers=owner_headers)
        assert listed.json() == []
        assert client.get(f"/api/v1/clients/{client_id}", headers=owner_headers).json()["tags"] == ["repeat"]

    def test_client_email_is_validated(self, client, owner_headers):
        response = client.post("/api/v1/clients/", json={"name": "Nobody", "email": "not-an-email"}, headers=owner_headers)
        assert response.status_code == 422

    def test_requires_authentication(self, client):
        assert client.get("/api/v1/venues/").status_code in (401, 403)
