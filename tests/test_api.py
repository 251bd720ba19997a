# =============================================================================
# tests/test_api.py - HTTP API Tests
# =============================================================================
# End-to-end tests through FastAPI's TestClient. Each test gets a fresh app,
# so stores start empty apart from the seeded test user.
# =============================================================================

import logging
from datetime import datetime, timedelta, timezone

import pytest

from core.models import NotificationStatus
from lib.mailer import MailerError
from lib.tokens import TokenIssuer
from tests.conftest import TEST_EMAIL, TEST_PASSWORD


# =============================================================================
# Auth
# =============================================================================

class TestLogin:
    """Tests for POST /api/auth/login."""

    def test_login_success(self, client):
        response = client.post("/api/auth/login", json={"email": TEST_EMAIL, "password": TEST_PASSWORD})

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Login successful"
        assert data["user"] == {"id": 1, "email": TEST_EMAIL}
        assert data["token"]

    def test_login_is_case_insensitive(self, client):
        response = client.post("/api/auth/login", json={"email": "TEST@WellnessHub.com", "password": TEST_PASSWORD})

        assert response.status_code == 200

    @pytest.mark.parametrize("body", [
        {"email": "nobody@example.com", "password": TEST_PASSWORD},
        {"email": TEST_EMAIL, "password": "wrong-password"},
    ])
    def test_bad_credentials_same_response(self, client, body):
        response = client.post("/api/auth/login", json=body)

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}

    def test_missing_fields(self, client):
        response = client.post("/api/auth/login", json={"email": TEST_EMAIL})

        assert response.status_code == 400
        assert response.json() == {"error": "Email and password are required"}

    def test_malformed_email(self, client):
        response = client.post("/api/auth/login", json={"email": "not-an-email", "password": "x"})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid email format"}

    def test_missing_body(self, client):
        response = client.post("/api/auth/login")

        assert response.status_code == 400
        assert response.json() == {"error": "Email and password are required"}


class TestRegister:
    """Tests for POST /api/auth/register."""

    def test_register_then_login(self, client):
        register = client.post("/api/auth/register", json={"email": "New@Example.com", "password": "secret1"})
        login = client.post("/api/auth/login", json={"email": "new@example.com", "password": "secret1"})

        assert register.status_code == 200
        assert register.json() == {"message": "User registered successfully"}
        assert login.status_code == 200

    def test_duplicate_registration(self, client):
        body = {"email": "jane@example.com", "password": "secret1"}

        first = client.post("/api/auth/register", json=body)
        second = client.post("/api/auth/register", json={**body, "email": "JANE@example.com"})

        assert first.status_code == 200
        assert second.status_code == 400
        assert second.json() == {"error": "User already exists"}

    def test_short_password(self, client):
        response = client.post("/api/auth/register", json={"email": "jane@example.com", "password": "123"})

        assert response.status_code == 400
        assert response.json() == {"error": "Password must be at least 6 characters"}

    def test_whitespace_password_is_accepted(self, client):
        register = client.post("/api/auth/register", json={"email": "space@example.com", "password": "      "})
        login = client.post("/api/auth/login", json={"email": "space@example.com", "password": "      "})

        assert register.status_code == 200
        assert register.json() == {"message": "User registered successfully"}
        assert login.status_code == 200

    def test_missing_body(self, client):
        response = client.post("/api/auth/register")

        assert response.status_code == 400
        assert response.json() == {"error": "Email and password are required"}


# =============================================================================
# Appointments / Contact / Newsletter
# =============================================================================

class TestAppointments:
    """Tests for POST /api/appointments."""

    def test_book_appointment(self, client, context, appointment_payload):
        response = client.post("/api/appointments", json=appointment_payload)

        assert response.status_code == 200
        assert response.json() == {
            "message": "Appointment booked successfully! Check your email for confirmation."
        }
        stored = context.appointments.list()
        assert len(stored) == 1
        assert stored[0].email == "jane.doe@example.com"

    def test_notification_logged_after_response(self, client, context, appointment_payload):
        client.post("/api/appointments", json=appointment_payload)

        tasks = context.notification_service.list_tasks()
        assert len(tasks) == 1
        assert tasks[0].status == NotificationStatus.LOGGED
        assert tasks[0].recipient == "jane.doe@example.com"

    def test_queued_task_id_is_logged(self, client, context, appointment_payload, caplog):
        with caplog.at_level(logging.DEBUG, logger="app.routers.appointments"):
            client.post("/api/appointments", json=appointment_payload)

        task = context.notification_service.list_tasks()[0]
        assert f"Queued notification {task.id}" in caplog.text

    def test_bad_email_not_stored(self, client, context, appointment_payload):
        appointment_payload["email"] = "not-an-email"

        response = client.post("/api/appointments", json=appointment_payload)

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid email format"}
        assert context.appointments.count() == 0
        assert context.notification_service.list_tasks() == []

    def test_missing_field(self, client, context, appointment_payload):
        del appointment_payload["phone"]

        response = client.post("/api/appointments", json=appointment_payload)

        assert response.status_code == 400
        assert response.json() == {"error": "All required fields must be filled"}
        assert context.appointments.count() == 0

    def test_failed_email_does_not_fail_booking(self, client, context, appointment_payload):
        class BrokenMailer:
            username = "studio@example.com"

            def send(self, sender, recipient, subject, html):
                raise MailerError("smtp down")

        context.notification_service.mailer = BrokenMailer()

        response = client.post("/api/appointments", json=appointment_payload)

        assert response.status_code == 200
        assert context.appointments.count() == 1
        task = context.notification_service.list_tasks()[0]
        assert task.status == NotificationStatus.FAILED

    def test_store_failure_is_500(self, client, context, appointment_payload, monkeypatch):
        def explode(record):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(context.appointments, "append", explode)

        response = client.post("/api/appointments", json=appointment_payload)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to book appointment"}


class TestContact:
    """Tests for POST /api/contact."""

    def test_submit_contact(self, client, context, contact_payload):
        response = client.post("/api/contact", json=contact_payload)

        assert response.status_code == 200
        assert response.json() == {"message": "Message sent successfully! We'll get back to you soon."}
        assert context.contacts.list()[0].name == "John Smith"

    def test_missing_name(self, client, contact_payload):
        contact_payload["name"] = ""

        response = client.post("/api/contact", json=contact_payload)

        assert response.status_code == 400
        assert response.json() == {"error": "All fields are required"}

    def test_missing_body(self, client, context):
        response = client.post("/api/contact")

        assert response.status_code == 400
        assert response.json() == {"error": "All fields are required"}
        assert context.contacts.count() == 0


class TestNewsletter:
    """Tests for POST /api/newsletter."""

    def test_case_insensitive_duplicate(self, client):
        first = client.post("/api/newsletter", json={"email": "A@Example.com"})
        second = client.post("/api/newsletter", json={"email": "a@example.com"})

        assert first.status_code == 200
        assert first.json() == {"message": "Successfully subscribed to our newsletter!"}
        assert second.status_code == 400
        assert second.json() == {"error": "Email already subscribed"}

    def test_missing_email(self, client):
        response = client.post("/api/newsletter", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "Email is required"}

    def test_missing_body(self, client):
        response = client.post("/api/newsletter")

        assert response.status_code == 400
        assert response.json() == {"error": "Email is required"}


# =============================================================================
# Admin
# =============================================================================

class TestAdmin:
    """Tests for the protected /api/admin routes."""

    def test_stats_requires_token(self, client):
        response = client.get("/api/admin/stats")

        assert response.status_code == 401
        assert response.json() == {"error": "Access token required"}

    def test_non_bearer_scheme_counts_as_no_token(self, client):
        response = client.get("/api/admin/stats", headers={"Authorization": "Basic abc"})

        assert response.status_code == 401
        assert response.json() == {"error": "Access token required"}

    def test_stats_rejects_garbage_token(self, client):
        response = client.get("/api/admin/stats", headers={"Authorization": "Bearer garbage"})

        assert response.status_code == 403
        assert response.json() == {"error": "Invalid token"}

    def test_stats_rejects_expired_token(self, client, settings):
        issued = datetime.now(timezone.utc) - timedelta(hours=24, seconds=1)
        token = TokenIssuer(secret=settings.JWT_SECRET).issue(1, now=issued)

        response = client.get("/api/admin/stats", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 403
        assert response.json() == {"error": "Invalid token"}

    def test_stats_rejects_forged_token(self, client):
        token = TokenIssuer(secret="someone-elses-secret-000").issue(1)

        response = client.get("/api/admin/stats", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 403

    def test_stats_summary(self, client, auth_headers, appointment_payload, contact_payload):
        for i in range(6):
            client.post("/api/appointments", json={**appointment_payload, "firstName": f"Person{i}"})
        client.post("/api/contact", json=contact_payload)
        client.post("/api/newsletter", json={"email": "fan@example.com"})

        response = client.get("/api/admin/stats", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["users"] == 1
        assert data["appointments"] == 6
        assert data["contacts"] == 1
        assert data["newsletters"] == 1
        assert len(data["recentAppointments"]) == 5
        assert data["recentAppointments"][-1]["firstName"] == "Person5"
        assert data["recentContacts"][0]["email"] == "john@example.com"
        assert "createdAt" in data["recentContacts"][0]

    def test_notification_status_endpoints(self, client, auth_headers, contact_payload):
        client.post("/api/contact", json=contact_payload)

        listing = client.get("/api/admin/notifications", headers=auth_headers)
        task_id = listing.json()[0]["id"]
        single = client.get(f"/api/admin/notifications/{task_id}", headers=auth_headers)
        missing = client.get("/api/admin/notifications/nope", headers=auth_headers)

        assert listing.status_code == 200
        assert single.json()["status"] == "logged"
        assert single.json()["kind"] == "contact"
        assert missing.status_code == 404


# =============================================================================
# Health / Fallbacks
# =============================================================================

class TestHealth:
    """Tests for GET /api/health."""

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "OK"
        assert data["version"] == "1.0.0"
        assert "timestamp" in data

    def test_uptime_never_decreases(self, client):
        uptimes = [client.get("/api/health").json()["uptime"] for _ in range(3)]

        assert uptimes == sorted(uptimes)


class TestFallbacks:
    """Tests for unmatched routes and malformed bodies."""

    def test_unknown_route(self, client):
        response = client.get("/api/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"error": "Route not found"}

    def test_wrong_method_is_not_found(self, client):
        response = client.get("/api/contact")

        assert response.status_code == 404
        assert response.json() == {"error": "Route not found"}

    def test_malformed_json(self, client):
        response = client.post(
            "/api/newsletter",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}
