# =============================================================================
# lib/ - Store Access and Fixtures
# =============================================================================
# This package contains the persistence-facing modules:
# - supabase_client.py: Store interface, live/mock stores, memoized accessor
# - mock_festivals.py: Placeholder festival listings for mock mode
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import (
    FestivalStore,
    LiveFestivalStore,
    MockFestivalStore,
    StoreError,
    SupabaseClient,
)
from lib.mock_festivals import MOCK_FESTIVALS, mock_festivals

__all__ = [
    # Store
    "FestivalStore",
    "LiveFestivalStore",
    "MockFestivalStore",
    "StoreError",
    "SupabaseClient",
    # Fixtures
    "MOCK_FESTIVALS",
    "mock_festivals",
]
