# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Clears Supabase credentials before any imports (tests never hit the network)
# - Provides festival rows and an in-memory store standing in for Supabase
# - Provides a TestClient wired to that store
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.pop("NEXT_PUBLIC_SUPABASE_URL", None)
os.environ.pop("NEXT_PUBLIC_SUPABASE_ANON_KEY", None)
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

from typing import Any

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_festival_store
from app.main import app
from lib.supabase_client import StoreError, SupabaseClient


# =============================================================================
# Fake Store
# =============================================================================

class InMemoryFestivalStore:
    """
    Dict-backed store with the same contract as LiveFestivalStore.

    Records every update call so tests can assert that rejected requests
    never reached the store.
    """

    mode = "live"

    def __init__(self, rows: list[dict[str, Any]]):
        self.rows = {str(row["id"]): dict(row) for row in rows}
        self.update_calls: list[tuple[str, dict[str, Any]]] = []

    def read(self, filters: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        filters = filters or {}
        rows = [
            dict(row) for row in self.rows.values()
            if all(row.get(column) == value for column, value in filters.items())
        ]
        return sorted(rows, key=lambda row: row["startDate"])

    def update(self, festival_id: str, patch: dict[str, Any]) -> dict[str, Any]:
        self.update_calls.append((festival_id, dict(patch)))
        row = self.rows.get(festival_id)
        if row is None:
            raise StoreError(
                message=f"No festival found with id {festival_id}",
                code="NO_MATCHING_ROW",
                suggestion="Check that the festival id is correct",
                details={"festival_id": festival_id},
            )
        row.update(patch)
        return dict(row)

    def ping(self) -> bool:
        return True


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def reset_store_accessor():
    """Make sure no memoized store leaks between tests."""
    SupabaseClient.reset()
    yield
    SupabaseClient.reset()


@pytest.fixture
def festival_rows():
    """Rows as stored in the festivals table."""
    return [
        {
            "id": "1",
            "name": "Tomorrowland",
            "startDate": "2025-07-18",
            "endDate": "2025-07-27",
            "location": {"city": "Boom", "country": "Belgium"},
            "source": {"name": "Tomorrowland Official", "url": "https://www.tomorrowland.com"},
            "favorite": False,
            "isArchived": False,
            "notes": "",
        },
        {
            "id": "2",
            "name": "Primavera Sound",
            "startDate": "2025-06-04",
            "endDate": "2025-06-08",
            "location": {"city": "Barcelona", "country": "Spain"},
            "source": {"name": "Primavera Official", "url": "https://www.primaverasound.com"},
            "favorite": True,
            "isArchived": False,
            "notes": None,
        },
    ]


@pytest.fixture
def fake_store(festival_rows):
    """In-memory live store seeded with festival_rows."""
    return InMemoryFestivalStore(festival_rows)


@pytest.fixture
def client(fake_store):
    """TestClient whose store dependency resolves to fake_store."""
    app.dependency_overrides[get_festival_store] = lambda: fake_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def store_client():
    """
    TestClient for a chosen store.

    Usage:
        api = store_client(MockFestivalStore())
    """
    def _make(store) -> TestClient:
        app.dependency_overrides[get_festival_store] = lambda: store
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
