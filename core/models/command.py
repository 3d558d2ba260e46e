# =============================================================================
# core/models/command.py - Preference Update Commands
# =============================================================================
# Typed commands parsed from raw request bodies before any store interaction:
# - FavoriteCommand: set the favorite flag ("favorite", legacy "isFavorite")
# - NotesCommand: replace the free-text notes
# - ArchiveCommand: set the archived flag ("archived", legacy "isArchived")
#
# Fields are strict: "yes" is not a boolean and 42 is not a string.
# from_body() raises pydantic.ValidationError on bad input.
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr


def _pick(body: Any, key: str, legacy_key: str) -> Any:
    """
    Resolve a field that may arrive under a legacy name.

    The primary key wins whenever it is present, even with a null value.
    A body that is not a JSON object has neither key.
    """
    if not isinstance(body, dict):
        return None
    if key in body:
        return body[key]
    return body.get(legacy_key)


class FavoriteCommand(BaseModel):
    """Set the favorite flag of one festival."""

    model_config = ConfigDict(frozen=True)

    festival_id: str
    favorite: StrictBool

    @classmethod
    def from_body(cls, festival_id: str, body: Any) -> "FavoriteCommand":
        return cls(festival_id=festival_id, favorite=_pick(body, "favorite", "isFavorite"))

    def to_patch(self) -> dict[str, Any]:
        return {"favorite": self.favorite}


class NotesCommand(BaseModel):
    """Replace the notes of one festival. An empty string clears them."""

    model_config = ConfigDict(frozen=True)

    festival_id: str
    notes: StrictStr

    @classmethod
    def from_body(cls, festival_id: str, body: Any) -> "NotesCommand":
        notes = body.get("notes") if isinstance(body, dict) else None
        return cls(festival_id=festival_id, notes=notes)

    def to_patch(self) -> dict[str, Any]:
        return {"notes": self.notes}


class ArchiveCommand(BaseModel):
    """Set the archived flag of one festival."""

    model_config = ConfigDict(frozen=True)

    festival_id: str
    archived: StrictBool

    @classmethod
    def from_body(cls, festival_id: str, body: Any) -> "ArchiveCommand":
        return cls(festival_id=festival_id, archived=_pick(body, "archived", "isArchived"))

    def to_patch(self) -> dict[str, Any]:
        return {"isArchived": self.archived}
