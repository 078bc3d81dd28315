"""Pytest fixtures for MedShare tests.

Provides:
- A fixed reference time for deterministic expiry arithmetic
- Fresh in-memory stores (empty and seeded with demo data)
- A TestClient whose store dependency is overridden per test

Usage:
    def test_list_clinics(client, seeded_store):
        response = client.get("/api/v1/clinics")
        assert response.status_code == 200
"""

import os

# Set environment variables BEFORE any application imports
os.environ.setdefault("SEED_DEMO_DATA", "false")
os.environ.setdefault("LOG_JSON", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from medshare.dependencies import get_store
from medshare.main import app
from medshare.store import InventoryStore, seed_demo_data


NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    """Fixed reference time used by unit tests."""
    return NOW


@pytest.fixture
def store() -> InventoryStore:
    """Empty store."""
    return InventoryStore()


@pytest.fixture
def seeded_store() -> InventoryStore:
    """Store loaded with demo data relative to the real current time.

    API calls compute expiry against the wall clock, so the seed must too.
    """
    return seed_demo_data(InventoryStore())


@pytest.fixture
def client(store: InventoryStore):
    """TestClient bound to the empty ``store`` fixture."""
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_client(seeded_store: InventoryStore):
    """TestClient bound to the ``seeded_store`` fixture."""
    app.dependency_overrides[get_store] = lambda: seeded_store
    yield TestClient(app)
    app.dependency_overrides.clear()
