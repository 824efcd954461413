"""API models package."""

from .errors import ErrorResponse, status_for, waitlist_error_handler

__all__ = [
    "ErrorResponse",
    "status_for",
    "waitlist_error_handler",
]
