"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Every service shares one JsonDocumentStore, so they all
see the same collections and serialize on the same lock.
"""

from typing import TYPE_CHECKING, Any

from shared.config import get_settings
from shared.models import utc_now

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from shared.database import JsonDocumentStore
    from modules.content.interfaces import IContentService
    from modules.drops.service import DropService
    from modules.insights.service import InsightsService
    from modules.notifications.interfaces import INotifier
    from modules.signups.interfaces import ISignupService


def build_default_document() -> dict[str, list[dict[str, Any]]]:
    """
    Document written when the store file does not exist yet.

    One drop window a week out and the seeded field notes; everything
    else starts empty.
    """
    from modules.content.seed import default_field_notes
    from modules.drops.seed import default_drop_window

    settings = get_settings()
    now = utc_now()
    window = default_drop_window(
        now,
        offset_days=settings.seed_drop_offset_days,
        length_days=settings.seed_drop_length_days,
    )
    return {
        "signups": [],
        "fieldNotes": [note.to_document() for note in default_field_notes(now)],
        "testimonials": [],
        "dropWindows": [window.to_document()],
        "events": [],
    }


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._store: "JsonDocumentStore | None" = None
        self._signup_service: "ISignupService | None" = None
        self._content_service: "IContentService | None" = None
        self._drop_service: "DropService | None" = None
        self._insights_service: "InsightsService | None" = None
        self._notifier: "INotifier | None" = None

    @property
    def store(self) -> "JsonDocumentStore":
        """Get the document store shared by every service."""
        if self._store is None:
            from shared.database import get_document_store
            self._store = get_document_store(build_default_document)
        return self._store

    @property
    def signups(self) -> "ISignupService":
        """Get the signup service instance."""
        if self._signup_service is None:
            from modules.signups.service import SignupService
            self._signup_service = SignupService(self.store)
        return self._signup_service

    @property
    def content(self) -> "IContentService":
        """Get the content service instance."""
        if self._content_service is None:
            from modules.content.service import ContentService
            self._content_service = ContentService(self.store)
        return self._content_service

    @property
    def drops(self) -> "DropService":
        """Get the drop service instance."""
        if self._drop_service is None:
            from modules.drops.service import DropService
            self._drop_service = DropService(self.store)
        return self._drop_service

    @property
    def insights(self) -> "InsightsService":
        """Get the insights service instance."""
        if self._insights_service is None:
            from modules.insights.service import InsightsService
            self._insights_service = InsightsService(self.store)
        return self._insights_service

    @property
    def notifier(self) -> "INotifier":
        """Get the email notifier instance."""
        if self._notifier is None:
            from modules.notifications.service import ResendNotifier
            self._notifier = ResendNotifier()
        return self._notifier

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._store = None
        self._signup_service = None
        self._content_service = None
        self._drop_service = None
        self._insights_service = None
        self._notifier = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container and the cached document store.

    The next call to get_container() creates a fresh container, which
    reopens the store file named by the current settings.

    Primarily used for testing.
    """
    global _container
    from shared.database import reset_store_cache
    _container = None
    reset_store_cache()


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_signup_service() -> "ISignupService":
    """FastAPI dependency for signup service."""
    return get_container().signups


def get_content_service() -> "IContentService":
    """FastAPI dependency for content service."""
    return get_container().content


def get_drop_service() -> "DropService":
    """FastAPI dependency for drop service."""
    return get_container().drops


def get_insights_service() -> "InsightsService":
    """FastAPI dependency for insights service."""
    return get_container().insights


def get_notifier() -> "INotifier":
    """FastAPI dependency for the email notifier."""
    return get_container().notifier
