"""
Error response models.

Standardized error responses for the API, and the mapping from
WaitlistError subclasses to HTTP status codes.
"""

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from shared.exceptions import (
    AuthenticationError,
    PersistenceError,
    WaitlistError,
)


class ErrorResponse(BaseModel):
    """Standard error response format (WaitlistError.to_dict())."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


# Checked in order; the first matching base class wins.
STATUS_BY_ERROR: list[tuple[type[WaitlistError], int]] = [
    (AuthenticationError, 401),
    (PersistenceError, 500),
]


def status_for(error: WaitlistError) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return 500


async def waitlist_error_handler(request: Request, exc: WaitlistError) -> JSONResponse:
    """Render a WaitlistError as an ErrorResponse body."""
    return JSONResponse(status_code=status_for(exc), content=exc.to_dict())
