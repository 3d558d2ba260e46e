# =============================================================================
# core/models/result.py - Response Envelope
# =============================================================================
# The favorite and archive endpoints answer with one of two shapes:
#
#   {"ok": true,  "success": true,  "message": ..., "data": <row | null>}
#   {"ok": false, "success": false, "kind": ..., "message": ..., "error"?, "details"?}
#
# `kind` tells clients which class of failure happened.
#
# The notes endpoint is the exception: it answers with the bare updated row
# and reports failures as {"error": ...} (ErrorBody).
# =============================================================================

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field


class ResultKind(str, Enum):
    """
    Failure classes.

    - validation: Request field missing or of the wrong type (400)
    - store: The festival store reported a failure (500)
    - unexpected: Anything else raised while handling the request (500)
    """
    VALIDATION = "validation"
    STORE = "store"
    UNEXPECTED = "unexpected"


class ApiSuccess(BaseModel):
    """Successful result; `data` is the updated row, or null in mock mode."""
    ok: Literal[True] = True
    success: Literal[True] = True
    message: str = Field(..., examples=["Festival added to favorites"])
    data: dict[str, Any] | None = None


class ApiFailure(BaseModel):
    """Failed result."""
    ok: Literal[False] = False
    success: Literal[False] = False
    kind: ResultKind
    message: str = Field(..., examples=['Invalid input. "favorite" must be a boolean value.'])
    error: str | None = None
    details: dict[str, Any] | None = None


class ErrorBody(BaseModel):
    """Plain failure body used by the notes endpoint."""
    error: str = Field(..., examples=["Invalid input: notes must be a string"])
