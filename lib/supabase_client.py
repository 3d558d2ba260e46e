# =============================================================================
# lib/supabase_client.py - Festival Store Access
# =============================================================================
# This module hides the choice between the hosted Supabase table and the
# inert mock store behind one small interface:
# - read(filters)          -> list of festival rows
# - update(id, patch)      -> updated row (or None in mock mode)
# - ping()                 -> whether the store answers
#
# The store is selected once, on first use, from configuration presence and
# memoized for the rest of the process. Selection never raises: any failure
# building a live client degrades to the mock store.
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   store = SupabaseClient.get_store()
#   row = store.update("1", {"favorite": True})
# =============================================================================

from __future__ import annotations

import logging
import threading
from typing import Any, Literal, Protocol

from supabase import Client, create_client

from app.config import Settings, settings as default_settings

# Set up logging for this module
logger = logging.getLogger(__name__)

StoreMode = Literal["live", "mock"]
StoreContext = Literal["server", "browser"]

# Column used to order listings
ORDER_COLUMN = "startDate"


class StoreError(Exception):
    """
    Error reported by the festival store.

    Raised for upstream failures and for updates that matched no row.
    """

    def __init__(
        self,
        message: str,
        code: str = "STORE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class FestivalStore(Protocol):
    """Capability shared by the live and mock stores."""

    mode: StoreMode

    def read(self, filters: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        ...

    def update(self, festival_id: str, patch: dict[str, Any]) -> dict[str, Any] | None:
        ...

    def ping(self) -> bool:
        ...


class LiveFestivalStore:
    """
    Festival store backed by a Supabase table.

    Each call is exactly one round-trip; there are no retries. Row-level
    write serialization is left to Postgres.
    """

    mode: StoreMode = "live"

    def __init__(self, client: Client, table: str = "festivals"):
        self.client = client
        self.table = table

    def read(self, filters: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        """
        Fetch festival rows ordered by start date.

        Args:
            filters: Column/value pairs, each applied as an equality match

        Returns:
            List of row dicts (empty if nothing matched)

        Raises:
            StoreError: If the query fails
        """
        filters = filters or {}

        try:
            query = self.client.table(self.table).select("*")
            for column, value in filters.items():
                query = query.eq(column, value)

            response = query.order(ORDER_COLUMN).execute()
            rows = response.data or []

            logger.debug(f"Fetched {len(rows)} rows from {self.table} (filters={filters})")
            return rows

        except Exception as e:
            raise StoreError(
                message=f"Failed to fetch festivals: {e}",
                code="FETCH_FESTIVALS_FAILED",
                suggestion=f"Check that the {self.table} table exists and is readable",
                details={"filters": filters},
            )

    def update(self, festival_id: str, patch: dict[str, Any]) -> dict[str, Any]:
        """
        Update a single festival row and return it.

        Args:
            festival_id: Value of the row's id column
            patch: Columns to set

        Returns:
            The updated row

        Raises:
            StoreError: If the update fails or no row has this id
        """
        try:
            response = (
                self.client.table(self.table)
                .update(patch)
                .eq("id", festival_id)
                .execute()
            )
        except Exception as e:
            raise StoreError(
                message=str(e),
                code="UPDATE_FAILED",
                details={"festival_id": festival_id, "columns": sorted(patch)},
            )

        if not response.data:
            raise StoreError(
                message=f"No festival found with id {festival_id}",
                code="NO_MATCHING_ROW",
                suggestion="Check that the festival id is correct",
                details={"festival_id": festival_id},
            )

        logger.info(f"Updated festival {festival_id}: {sorted(patch)}")
        return response.data[0]

    def ping(self) -> bool:
        """Run a one-row query; False if the store does not answer."""
        try:
            self.client.table(self.table).select("id").limit(1).execute()
            return True
        except Exception as e:
            logger.warning(f"Store ping failed: {e}")
            return False


class MockFestivalStore:
    """
    Inert stand-in used when no live backend is configured.

    Reads are always empty and writes report null data without error.
    """

    mode: StoreMode = "mock"

    def read(self, filters: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        return []

    def update(self, festival_id: str, patch: dict[str, Any]) -> None:
        logger.debug(f"Mock store ignoring update of festival {festival_id}")
        return None

    def ping(self) -> bool:
        return True


class SupabaseClient:
    """
    Accessor for the process-wide festival store.

    The store is resolved once on first request and memoized. Callers never
    branch on availability; they get a live or mock store with the same shape.

    Example:
        store = SupabaseClient.get_store()
        if store.mode == "mock":
            ...
    """

    _instance: FestivalStore | None = None
    _lock = threading.Lock()

    @classmethod
    def create_store(
        cls,
        config: Settings | None = None,
        context: StoreContext = "server",
    ) -> FestivalStore:
        """
        Build a store from configuration. Never raises.

        In the server context a live client is only built when both the URL
        and the anon key are present. In the browser context the credentials
        are expected to be embedded at build time, so a live client is always
        attempted.

        Args:
            config: Settings to read credentials from (defaults to app settings)
            context: "server" or "browser"

        Returns:
            LiveFestivalStore or MockFestivalStore
        """
        config = config or default_settings

        if context == "server" and not config.supabase_configured:
            logger.warning("Supabase credentials not set, using mock festival store")
            return MockFestivalStore()

        try:
            client = create_client(
                config.NEXT_PUBLIC_SUPABASE_URL or "",
                config.NEXT_PUBLIC_SUPABASE_ANON_KEY or "",
            )
        except Exception as e:
            logger.warning(f"Failed to create Supabase client, using mock festival store: {e}")
            return MockFestivalStore()

        logger.info("Supabase client initialized successfully")
        return LiveFestivalStore(client, table=config.FESTIVALS_TABLE)

    @classmethod
    def get_store(cls) -> FestivalStore:
        """Get or create the memoized store."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls.create_store()
                    logger.info(f"Festival store resolved in {cls._instance.mode} mode")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the memoized store so the next call resolves again."""
        with cls._lock:
            cls._instance = None
