# =============================================================================
# core/models/festival.py - Festival Schemas
# =============================================================================
# These models define the festival record shapes:
# - Festival: Immutable reference data (name, dates, location, source link)
# - FestivalWithPreferences: Festival plus the user-mutable annotations
# - FestivalList: Listing response for GET /festivals
#
# On the wire fields use camelCase aliases (startDate, isFavorite, ...).
# Rows from the festivals table store the favorite flag in a column named
# `favorite`; FestivalWithPreferences.from_row() maps it to isFavorite.
# =============================================================================

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Location(BaseModel):
    """Where a festival takes place."""
    city: str = ""
    country: str = ""


class Source(BaseModel):
    """Where a festival listing was found."""
    name: str = ""
    url: str = ""


class Festival(BaseModel):
    """
    Reference record describing a music festival.

    Rows are created by an external ingestion process; this service never
    changes these fields. startDate <= endDate is expected but not enforced.

    Example:
        {
            "id": "1",
            "name": "Tomorrowland",
            "startDate": "2025-07-18",
            "endDate": "2025-07-27",
            "location": {"city": "Boom", "country": "Belgium"},
            "source": {"name": "Tomorrowland Official", "url": "https://www.tomorrowland.com"}
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    # Opaque unique identifier (text, integer or UUID in the table)
    id: str = Field(..., description="Unique festival identifier")

    name: str = Field(..., description="Festival name")

    # ISO-8601 date strings
    start_date: str = Field(..., alias="startDate", description="First day (YYYY-MM-DD)")
    end_date: str = Field(..., alias="endDate", description="Last day (YYYY-MM-DD)")

    location: Location = Field(default_factory=Location)
    source: Source = Field(default_factory=Source)

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        if isinstance(value, (int, UUID)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("location", "source", mode="before")
    @classmethod
    def _empty_when_null(cls, value: Any) -> Any:
        return {} if value is None else value


class FestivalWithPreferences(Festival):
    """
    Festival plus user annotations.

    is_favorite, is_archived and notes are the only fields ever mutated
    after a row is created.
    """

    is_favorite: bool = Field(default=False, alias="isFavorite")
    is_archived: bool = Field(default=False, alias="isArchived")
    notes: str = Field(default="", description="Free-text notes")

    @model_validator(mode="before")
    @classmethod
    def _map_favorite_column(cls, data: Any) -> Any:
        # The table names the flag `favorite`
        if isinstance(data, dict) and "favorite" in data and "isFavorite" not in data:
            data = {**data, "isFavorite": data["favorite"]}
        return data

    @field_validator("is_favorite", "is_archived", mode="before")
    @classmethod
    def _false_when_null(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("notes", mode="before")
    @classmethod
    def _blank_when_null(cls, value: Any) -> Any:
        return "" if value is None else value

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "FestivalWithPreferences":
        """Build from a festivals table row (or a mock record)."""
        return cls.model_validate(row)


class FestivalList(BaseModel):
    """
    Response for listing festivals.

    Example:
        {"count": 2, "festivals": [...]}
    """
    count: int = Field(default=0, ge=0)
    festivals: list[FestivalWithPreferences] = Field(default_factory=list)
