"""
Base exception classes for the waitlist backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.

Note that lookups which simply find nothing (unknown token, unknown code,
unknown id) are not exceptional: services return None/False or a tagged
result for those. Exceptions are reserved for failures the caller cannot
recover from in-band.
"""

from typing import Optional, Any


class WaitlistError(Exception):
    """
    Base exception for all waitlist errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class AuthenticationError(WaitlistError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class PersistenceError(WaitlistError):
    """The durable copy of the store could not be read or written."""

    def __init__(
        self,
        message: str,
        path: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.path = path
        self.details["path"] = path
