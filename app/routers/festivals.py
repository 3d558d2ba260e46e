# =============================================================================
# app/routers/festivals.py - Festival Endpoints
# =============================================================================
# Listing plus the three preference updates (favorite, notes, archive).
# Request bodies are read raw and parsed into typed commands by the service,
# so type errors surface as 400 instead of being coerced.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Path, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.dependencies import StoreDep
from app.exceptions import FestivalStoreError, InvalidInputError, request_boundary
from core.models.festival import FestivalList
from core.models.result import ApiFailure, ApiSuccess, ErrorBody
from core.services.festival_service import FestivalService

logger = logging.getLogger(__name__)

router = APIRouter()

FAILURES = {
    400: {"model": ApiFailure, "description": "Invalid input"},
    500: {"model": ApiFailure, "description": "Store failure or unexpected error"},
}

# The notes endpoint answers with the bare row and a plain {"error": ...} on failure
NOTES_FAILURES = {
    400: {"model": ErrorBody, "description": "Invalid input"},
    500: {"model": ErrorBody, "description": "Store failure or unexpected error"},
}

FestivalId = Annotated[str, Path(description="Festival identifier")]


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=FestivalList, responses=FAILURES)
async def list_festivals(
    store: StoreDep,
    favorite: Annotated[bool | None, Query(description="Only favorites (true) or non-favorites (false)")] = None,
    archived: Annotated[bool | None, Query(description="Only archived (true) or active (false)")] = None,
):
    """
    List festivals ordered by start date.

    Without a configured Supabase backend the placeholder listings are returned.
    """
    with request_boundary("festival listing"):
        festivals = FestivalService.list_festivals(store, favorite=favorite, archived=archived)

    return FestivalList(count=len(festivals), festivals=festivals)


@router.post("/{festival_id}/favorite", response_model=ApiSuccess, responses=FAILURES)
async def toggle_favorite(festival_id: FestivalId, request: Request, store: StoreDep):
    """
    Add a festival to, or remove it from, favorites.

    Body: {"favorite": bool} (legacy {"isFavorite": bool} is also accepted;
    "favorite" wins when both are sent).
    """
    with request_boundary("favorite update"):
        body = await request.json()
        command = FestivalService.parse_favorite(festival_id, body)
        row = FestivalService.set_favorite(store, command)

    action = "added to" if command.favorite else "removed from"
    return ApiSuccess(message=f"Festival {action} favorites", data=row)


@router.post("/{festival_id}/notes", responses=NOTES_FAILURES)
async def update_notes(festival_id: FestivalId, request: Request, store: StoreDep):
    """
    Replace the notes of a festival.

    Body: {"notes": str}. An empty string clears the notes.

    Responds with the updated row itself (null in mock mode). Failures are
    reported as {"error": ...}.
    """
    try:
        body = await request.json()
        command = FestivalService.parse_notes(festival_id, body)
        row = FestivalService.set_notes(store, command)
    except InvalidInputError as e:
        return JSONResponse(status_code=400, content=ErrorBody(error=e.message).model_dump())
    except FestivalStoreError as e:
        return JSONResponse(status_code=500, content=ErrorBody(error=e.error or e.message).model_dump())
    except Exception as e:
        logger.exception(f"Error processing notes update for festival {festival_id}: {e}")
        return JSONResponse(status_code=500, content=ErrorBody(error="Internal Server Error").model_dump())

    return JSONResponse(status_code=200, content=jsonable_encoder(row))


@router.post("/{festival_id}/archive", response_model=ApiSuccess, responses=FAILURES)
async def toggle_archive(festival_id: FestivalId, request: Request, store: StoreDep):
    """
    Archive a festival or restore it from the archive.

    Body: {"archived": bool} (legacy {"isArchived": bool} is also accepted).
    """
    with request_boundary("archive update"):
        body = await request.json()
        command = FestivalService.parse_archive(festival_id, body)
        row = FestivalService.set_archived(store, command)

    message = "Festival archived" if command.archived else "Festival restored from archive"
    return ApiSuccess(message=message, data=row)
