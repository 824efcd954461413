"""
Shared infrastructure for the waitlist backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: JSON document store and its collections
- exceptions: Base exception classes
- models: Record base class and timestamp helpers

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import (
    Collection,
    DuplicateKeyError,
    JsonDocumentStore,
    StoreLoadError,
    StoreWriteError,
    get_document_store,
    reset_store_cache,
)
from .exceptions import (
    WaitlistError,
    AuthenticationError,
    PersistenceError,
)
from .models import (
    CamelModel,
    StoreRecord,
    Timestamp,
    format_timestamp,
    utc_day,
    utc_now,
)

__all__ = [
    "Settings",
    "get_settings",
    "Collection",
    "DuplicateKeyError",
    "JsonDocumentStore",
    "StoreLoadError",
    "StoreWriteError",
    "get_document_store",
    "reset_store_cache",
    "WaitlistError",
    "AuthenticationError",
    "PersistenceError",
    "CamelModel",
    "StoreRecord",
    "Timestamp",
    "format_timestamp",
    "utc_day",
    "utc_now",
]
