"""
Drops module.

Timed drop windows and the waitlist / live / post state derived from them.

Public API:
- DropService: Reads windows and derives the current state
- DropWindow, DropState, DropPhase: Models
"""

from .models import DropPhase, DropState, DropWindow, NO_WINDOW_MESSAGE
from .seed import default_drop_window
from .service import DROP_WINDOWS, DropService, derive_drop_state

__all__ = [
    "DropPhase",
    "DropState",
    "DropWindow",
    "NO_WINDOW_MESSAGE",
    "DROP_WINDOWS",
    "DropService",
    "derive_drop_state",
    "default_drop_window",
]
