# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - festival.py: Festival records and listing response
# - command.py: Typed preference-update commands parsed from request bodies
# - result.py: The shared success/failure response envelope
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Festival Models - Reference data and user annotations
# -----------------------------------------------------------------------------
from .festival import (
    Festival,
    FestivalList,
    FestivalWithPreferences,
    Location,
    Source,
)

# -----------------------------------------------------------------------------
# Command Models - Parsed request bodies
# -----------------------------------------------------------------------------
from .command import (
    ArchiveCommand,
    FavoriteCommand,
    NotesCommand,
)

# -----------------------------------------------------------------------------
# Result Models - Response envelope
# -----------------------------------------------------------------------------
from .result import (
    ApiFailure,
    ApiSuccess,
    ErrorBody,
    ResultKind,
)

__all__ = [
    # Festival
    "Festival",
    "FestivalList",
    "FestivalWithPreferences",
    "Location",
    "Source",
    # Commands
    "ArchiveCommand",
    "FavoriteCommand",
    "NotesCommand",
    # Results
    "ApiFailure",
    "ApiSuccess",
    "ErrorBody",
    "ResultKind",
]
