# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up test environment variables before any imports
# - Builds a fresh app (with empty stores) per test
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.config loads settings at import time and app.main builds an app

os.environ["ENVIRONMENT"] = "development"
os.environ["JWT_SECRET"] = "test-secret-key-0123456789"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SEED_TEST_USER"] = "true"
for var in ("EMAIL_USER", "EMAIL_PASS", "MAIL_FROM", "ADMIN_EMAIL"):
    os.environ.pop(var, None)

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from core.repositories import InMemoryRepository
from lib.ids import MonotonicIdGenerator

TEST_EMAIL = "test@wellnesshub.com"
TEST_PASSWORD = "password123"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings():
    """Settings with fast hashing and email disabled."""
    return Settings(
        JWT_SECRET="test-secret-key-0123456789",
        BCRYPT_ROUNDS=4,
        EMAIL_USER=None,
        EMAIL_PASS=None,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def context(app):
    return app.state.context


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def auth_headers(client):
    """Authorization header for the seeded test user."""
    response = client.post(
        "/api/auth/login",
        json={"email": TEST_EMAIL, "password": TEST_PASSWORD},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def ids():
    return MonotonicIdGenerator()


@pytest.fixture
def repository():
    return InMemoryRepository("test")


@pytest.fixture
def appointment_payload():
    """Valid appointment body in the frontend's camelCase."""
    return {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "Jane.Doe@Example.com",
        "phone": "555-0100",
        "service": "Massage Therapy",
        "date": "2024-06-01",
        "time": "10:00",
        "message": "First visit",
    }


@pytest.fixture
def contact_payload():
    return {
        "name": "  John Smith ",
        "email": "john@example.com",
        "message": " Do you offer gift cards?  ",
    }
