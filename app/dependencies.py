# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends

from lib.supabase_client import FestivalStore, SupabaseClient


def get_festival_store() -> FestivalStore:
    """
    Get the festival store.

    Returns the memoized live or mock store.
    """
    return SupabaseClient.get_store()


# Type alias for dependency injection
StoreDep = Annotated[FestivalStore, Depends(get_festival_store)]
