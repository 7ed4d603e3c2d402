# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Swaps the Supabase client for an in-memory fake
# - Provides users, tokens and a small data set for API tests
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-signing-tokens")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient

from app.main import app
from core.models.user import UserRole
from lib.security import create_access_token, hash_password
from lib.supabase_client import SupabaseClient
from tests.fake_supabase import FakeSupabase

TEST_PASSWORD = "Password123!"


# =============================================================================
# Database & Client Fixtures
# =============================================================================

@pytest.fixture
def fake_db():
    """Install an empty in-memory database as the Supabase singleton."""
    db = FakeSupabase()
    SupabaseClient._instance = db
    yield db
    SupabaseClient._instance = None


@pytest.fixture
def client(fake_db):
    """TestClient wired to the fake database."""
    return TestClient(app)


# =============================================================================
# Users & Tokens
# =============================================================================

def auth_headers(user: dict) -> dict:
    """Bearer header for a user row."""
    token = create_access_token(user["id"], user["email"], user["role"])
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def users(fake_db):
    """One user per role, plus a second CLIENT and a second OPERATOR."""
    password_hash = hash_password(TEST_PASSWORD, rounds=4)

    def make(key, role, email):
        return key, fake_db.store("users", {
            "email": email,
            "name": key.replace("_", " ").title(),
            "surname": "Test",
            "role": role.value,
            "password": password_hash,
            "oauth_provider": "APP",
        })

    created = dict([
        make("citizen", UserRole.USER, "citizen@example.com"),
        make("client", UserRole.CLIENT, "client@example.com"),
        make("other_client", UserRole.CLIENT, "other.client@example.com"),
        make("operator", UserRole.OPERATOR, "operator@example.com"),
        make("other_operator", UserRole.OPERATOR, "other.operator@example.com"),
        make("admin", UserRole.ADMIN, "admin@example.com"),
    ])
    fake_db.store("operators", {
        "user_id": created["operator"]["id"],
        "organization_name": "Comune di Test",
    })
    return created


@pytest.fixture
def headers(users):
    """Authorization headers keyed like the `users` fixture."""
    return {key: auth_headers(user) for key, user in users.items()}


# =============================================================================
# Data Set
# =============================================================================

@pytest.fixture
def waste_types(fake_db):
    return [
        fake_db.store("waste_types", {"name": "Plastica", "color": "#FFD700", "icon_name": "recycle"}),
        fake_db.store("waste_types", {"name": "Vetro", "color": "#228B22", "icon_name": "wine-bottle"}),
    ]


@pytest.fixture
def collection_point(fake_db, users, waste_types):
    """An active point in Roma run by `operator`, accepting both waste types."""
    point = fake_db.store("collection_points", {
        "operator_id": users["operator"]["id"],
        "name": "Isola Ecologica Centro",
        "is_active": True,
        "avg_rating": None,
    })
    fake_db.store("addresses", {
        "collection_point_id": point["id"],
        "street": "Via Roma",
        "number": "123",
        "city": "Roma",
        "country": "Italia",
    })
    fake_db.store("schedules", {
        "collection_point_id": point["id"],
        "monday": True,
        "opening_time": "08:00",
        "closing_time": "20:00",
    })
    for wt in waste_types:
        fake_db.store("collection_point_waste_types", {
            "collection_point_id": point["id"],
            "waste_type_id": wt["id"],
        })
    return point


@pytest.fixture
def reviews(fake_db, users, collection_point):
    """Two reviews (5 and 2 stars) with the point's average set to match."""
    first = fake_db.store("reviews", {
        "user_id": users["client"]["id"],
        "collection_point_id": collection_point["id"],
        "rating": 5,
        "text": "Ottimo",
    })
    second = fake_db.store("reviews", {
        "user_id": users["other_client"]["id"],
        "collection_point_id": collection_point["id"],
        "rating": 2,
        "text": "Sporco",
    })
    collection_point["avg_rating"] = 3.5
    return {"client": first, "other_client": second}
