"""
SNOOOM waitlist API package.

Provides the FastAPI application for the waitlist, referral and
early-access service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
