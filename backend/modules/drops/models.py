"""
Drops module data models.
"""

from enum import Enum
from typing import Optional

from shared.models import CamelModel, StoreRecord, Timestamp


class DropPhase(str, Enum):
    """Where "now" sits relative to the current drop window."""

    WAITLIST = "waitlist"  # Before the window opens (or no window at all)
    LIVE = "live"          # Inside the window, both ends inclusive
    POST = "post"          # After the window closed


NO_WINDOW_MESSAGE = "Waitlist only"


class DropWindow(StoreRecord):
    """A scheduled sale window with the copy shown in each phase."""

    name: str
    start_at: Timestamp
    end_at: Timestamp
    waitlist_copy: str
    live_copy: str
    post_copy: str


class DropState(CamelModel):
    """Derived drop state; never stored."""

    state: DropPhase
    message: str
    window: Optional[DropWindow] = None
