# =============================================================================
# tests/test_supabase_client.py - Store Access Tests
# =============================================================================
# This module contains tests for:
# - Store selection from configuration (never raises)
# - Memoization of the process-wide store
# - LiveFestivalStore queries against a mocked Supabase client
# - MockFestivalStore behavior
#
# Tests use mocked Supabase clients to avoid network calls.
# =============================================================================

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock, patch

import pytest

from app.config import Settings
from lib.supabase_client import (
    LiveFestivalStore,
    MockFestivalStore,
    StoreError,
    SupabaseClient,
)


def make_settings(url=None, key=None, **overrides) -> Settings:
    return Settings(
        _env_file=None,
        NEXT_PUBLIC_SUPABASE_URL=url,
        NEXT_PUBLIC_SUPABASE_ANON_KEY=key,
        **overrides,
    )


# =============================================================================
# Settings
# =============================================================================

class TestSupabaseSettings:
    """Test credential detection."""

    def test_both_credentials_required(self):
        assert make_settings("https://x.supabase.co", "anon").supabase_configured is True
        assert make_settings("https://x.supabase.co", None).supabase_configured is False
        assert make_settings(None, "anon").supabase_configured is False

    def test_empty_env_values_are_unset(self, monkeypatch):
        monkeypatch.setenv("NEXT_PUBLIC_SUPABASE_URL", "")
        monkeypatch.setenv("NEXT_PUBLIC_SUPABASE_ANON_KEY", "anon")

        config = Settings(_env_file=None)

        assert config.NEXT_PUBLIC_SUPABASE_URL is None
        assert config.supabase_configured is False


# =============================================================================
# Store Selection
# =============================================================================

class TestCreateStore:
    """Test SupabaseClient.create_store selection policy."""

    def test_no_credentials_gives_mock(self):
        with patch("lib.supabase_client.create_client") as create:
            store = SupabaseClient.create_store(make_settings())

        assert isinstance(store, MockFestivalStore)
        create.assert_not_called()

    def test_partial_credentials_give_mock(self):
        with patch("lib.supabase_client.create_client") as create:
            store = SupabaseClient.create_store(make_settings(url="https://x.supabase.co"))

        assert store.mode == "mock"
        create.assert_not_called()

    def test_credentials_give_live_store(self):
        fake_client = MagicMock()
        config = make_settings("https://x.supabase.co", "anon", FESTIVALS_TABLE="festivals_v2")

        with patch("lib.supabase_client.create_client", return_value=fake_client) as create:
            store = SupabaseClient.create_store(config)

        create.assert_called_once_with("https://x.supabase.co", "anon")
        assert isinstance(store, LiveFestivalStore)
        assert store.client is fake_client
        assert store.table == "festivals_v2"

    def test_construction_error_degrades_to_mock(self):
        config = make_settings("not a url", "anon")

        with patch("lib.supabase_client.create_client", side_effect=ValueError("Invalid URL")):
            store = SupabaseClient.create_store(config)

        assert isinstance(store, MockFestivalStore)

    def test_browser_context_always_attempts_live_client(self):
        with patch("lib.supabase_client.create_client", return_value=MagicMock()) as create:
            store = SupabaseClient.create_store(make_settings(), context="browser")

        create.assert_called_once_with("", "")
        assert store.mode == "live"

    def test_browser_context_failure_degrades_to_mock(self):
        with patch("lib.supabase_client.create_client", side_effect=Exception("supabase_url is required")):
            store = SupabaseClient.create_store(make_settings(), context="browser")

        assert store.mode == "mock"


class TestGetStore:
    """Test the memoized accessor."""

    def test_resolved_once(self):
        with patch.object(SupabaseClient, "create_store", return_value=MockFestivalStore()) as create:
            first = SupabaseClient.get_store()
            second = SupabaseClient.get_store()

        assert first is second
        create.assert_called_once()

    def test_reset_resolves_again(self):
        with patch.object(SupabaseClient, "create_store", side_effect=[MockFestivalStore(), MockFestivalStore()]):
            first = SupabaseClient.get_store()
            SupabaseClient.reset()
            second = SupabaseClient.get_store()

        assert first is not second

    def test_concurrent_first_calls_resolve_once(self):
        """Threads racing on the first call all share one store."""
        started = threading.Barrier(8)

        def slow_create(*args, **kwargs):
            time.sleep(0.05)
            return MockFestivalStore()

        def resolve():
            started.wait()
            return SupabaseClient.get_store()

        with patch.object(SupabaseClient, "create_store", side_effect=slow_create) as create:
            with ThreadPoolExecutor(max_workers=8) as pool:
                stores = list(pool.map(lambda _: resolve(), range(8)))

        create.assert_called_once()
        assert all(store is stores[0] for store in stores)

    def test_unconfigured_environment_gives_inert_store(self):
        """With credentials unset, reads are empty and writes are inert."""
        store = SupabaseClient.get_store()

        assert store.read() == []
        assert store.read({"favorite": True}) == []
        assert store.update("1", {"favorite": True}) is None


# =============================================================================
# LiveFestivalStore
# =============================================================================

class TestLiveFestivalStore:
    """Test queries issued against the Supabase client."""

    @pytest.fixture
    def supabase(self):
        return MagicMock()

    def test_update_returns_row(self, supabase):
        update = supabase.table.return_value.update
        update.return_value.eq.return_value.execute.return_value = MagicMock(
            data=[{"id": "1", "favorite": True}]
        )
        store = LiveFestivalStore(supabase, table="festivals")

        row = store.update("1", {"favorite": True})

        assert row == {"id": "1", "favorite": True}
        supabase.table.assert_called_once_with("festivals")
        update.assert_called_once_with({"favorite": True})
        update.return_value.eq.assert_called_once_with("id", "1")

    def test_update_without_match_raises(self, supabase):
        supabase.table.return_value.update.return_value.eq.return_value.execute.return_value = MagicMock(data=[])
        store = LiveFestivalStore(supabase)

        with pytest.raises(StoreError) as exc_info:
            store.update("999", {"notes": "x"})

        assert exc_info.value.code == "NO_MATCHING_ROW"
        assert "999" in exc_info.value.message

    def test_update_upstream_error(self, supabase):
        supabase.table.return_value.update.return_value.eq.return_value.execute.side_effect = Exception(
            "permission denied for table festivals"
        )
        store = LiveFestivalStore(supabase)

        with pytest.raises(StoreError) as exc_info:
            store.update("1", {"favorite": True})

        assert exc_info.value.code == "UPDATE_FAILED"
        assert exc_info.value.message == "permission denied for table festivals"

    def test_read_applies_filters_and_order(self, supabase):
        select = supabase.table.return_value.select
        ordered = select.return_value.eq.return_value.order
        ordered.return_value.execute.return_value = MagicMock(data=[{"id": "1"}])
        store = LiveFestivalStore(supabase)

        rows = store.read({"favorite": True})

        assert rows == [{"id": "1"}]
        select.assert_called_once_with("*")
        select.return_value.eq.assert_called_once_with("favorite", True)
        ordered.assert_called_once_with("startDate")

    def test_read_null_data_is_empty(self, supabase):
        select = supabase.table.return_value.select
        select.return_value.order.return_value.execute.return_value = MagicMock(data=None)

        assert LiveFestivalStore(supabase).read() == []

    def test_read_error_raises(self, supabase):
        supabase.table.return_value.select.side_effect = Exception("connection refused")

        with pytest.raises(StoreError) as exc_info:
            LiveFestivalStore(supabase).read()

        assert exc_info.value.code == "FETCH_FESTIVALS_FAILED"

    def test_ping(self, supabase):
        store = LiveFestivalStore(supabase)
        assert store.ping() is True

        supabase.table.return_value.select.return_value.limit.return_value.execute.side_effect = Exception("down")
        assert store.ping() is False


# =============================================================================
# MockFestivalStore
# =============================================================================

class TestMockFestivalStore:
    """Test the inert stand-in."""

    def test_reads_empty(self):
        assert MockFestivalStore().read() == []

    def test_writes_inert(self):
        assert MockFestivalStore().update("1", {"notes": "x"}) is None

    def test_mode(self):
        assert MockFestivalStore().mode == "mock"
        assert MockFestivalStore().ping() is True
