# =============================================================================
# core/services/festival_service.py - Festival Business Logic
# =============================================================================
# Parses request bodies into commands, applies them to the festival store and
# turns store failures into API exceptions. Separates HTTP concerns from
# store access.
# =============================================================================

import logging
from typing import Any

from pydantic import ValidationError

from app.exceptions import FestivalStoreError, InvalidInputError
from core.models.command import ArchiveCommand, FavoriteCommand, NotesCommand
from core.models.festival import FestivalWithPreferences
from lib.mock_festivals import mock_festivals
from lib.supabase_client import FestivalStore, StoreError

logger = logging.getLogger(__name__)

# Filter name -> column (and mock record key)
FILTER_COLUMNS = {
    "favorite": ("favorite", "isFavorite"),
    "archived": ("isArchived", "isArchived"),
}


class FestivalService:
    """
    Service for festival listing and preference updates.

    Each update is a single store round-trip; nothing is retried.
    """

    # -------------------------------------------------------------------------
    # Parsing
    # -------------------------------------------------------------------------

    @staticmethod
    def parse_favorite(festival_id: str, body: Any) -> FavoriteCommand:
        """
        Parse a favorite toggle body.

        Raises:
            InvalidInputError: If the resolved value is not a boolean
        """
        try:
            return FavoriteCommand.from_body(festival_id, body)
        except ValidationError:
            logger.warning(f"Invalid favorite value for festival {festival_id}")
            raise InvalidInputError('Invalid input. "favorite" must be a boolean value.', field="favorite")

    @staticmethod
    def parse_notes(festival_id: str, body: Any) -> NotesCommand:
        """
        Parse a notes update body.

        Raises:
            InvalidInputError: If notes is not a string
        """
        try:
            return NotesCommand.from_body(festival_id, body)
        except ValidationError:
            logger.warning(f"Invalid notes value for festival {festival_id}")
            raise InvalidInputError("Invalid input: notes must be a string", field="notes")

    @staticmethod
    def parse_archive(festival_id: str, body: Any) -> ArchiveCommand:
        """
        Parse an archive toggle body.

        Raises:
            InvalidInputError: If the resolved value is not a boolean
        """
        try:
            return ArchiveCommand.from_body(festival_id, body)
        except ValidationError:
            logger.warning(f"Invalid archived value for festival {festival_id}")
            raise InvalidInputError('Invalid input. "archived" must be a boolean value.', field="archived")

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @staticmethod
    def list_festivals(
        store: FestivalStore,
        favorite: bool | None = None,
        archived: bool | None = None,
    ) -> list[FestivalWithPreferences]:
        """
        List festivals ordered by start date.

        In mock mode the placeholder fixture is served instead of the
        (always empty) store read.

        Args:
            store: Festival store
            favorite: Only festivals with this favorite flag
            archived: Only festivals with this archived flag

        Returns:
            List of FestivalWithPreferences

        Raises:
            FestivalStoreError: If the store read fails
        """
        wanted = {
            name: value
            for name, value in (("favorite", favorite), ("archived", archived))
            if value is not None
        }

        if store.mode == "mock":
            records = mock_festivals()
            for name, value in wanted.items():
                key = FILTER_COLUMNS[name][1]
                records = [r for r in records if r[key] == value]
            records.sort(key=lambda r: r["startDate"])
            return [FestivalWithPreferences.from_row(r) for r in records]

        filters = {FILTER_COLUMNS[name][0]: value for name, value in wanted.items()}
        try:
            rows = store.read(filters)
        except StoreError as e:
            logger.error(f"Failed to list festivals: {e}")
            raise FestivalStoreError(
                message="Database error when fetching festivals",
                error=e.message,
                code=e.code,
                details=e.details,
                suggestion=e.suggestion,
            )

        logger.info(f"Found {len(rows)} festivals in store")
        return [FestivalWithPreferences.from_row(row) for row in rows]

    # -------------------------------------------------------------------------
    # Updates
    # -------------------------------------------------------------------------

    @staticmethod
    def _apply(store: FestivalStore, festival_id: str, patch: dict[str, Any], what: str) -> dict[str, Any] | None:
        try:
            return store.update(festival_id, patch)
        except StoreError as e:
            logger.error(f"Error updating {what} for festival {festival_id}: {e}")
            raise FestivalStoreError(
                message=f"Database error when updating {what}",
                error=e.message,
                code=e.code,
                details={"festival_id": festival_id},
                suggestion=e.suggestion,
            )

    @staticmethod
    def set_favorite(store: FestivalStore, command: FavoriteCommand) -> dict[str, Any] | None:
        """
        Set the favorite flag of one festival.

        Returns:
            The updated row (None in mock mode)

        Raises:
            FestivalStoreError: If the update fails or no row matches
        """
        return FestivalService._apply(store, command.festival_id, command.to_patch(), "favorite status")

    @staticmethod
    def set_notes(store: FestivalStore, command: NotesCommand) -> dict[str, Any] | None:
        """Replace the notes of one festival; see set_favorite."""
        return FestivalService._apply(store, command.festival_id, command.to_patch(), "notes")

    @staticmethod
    def set_archived(store: FestivalStore, command: ArchiveCommand) -> dict[str, Any] | None:
        """Set the archived flag of one festival; see set_favorite."""
        return FestivalService._apply(store, command.festival_id, command.to_patch(), "archived status")
