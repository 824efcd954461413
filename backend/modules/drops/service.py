"""
Drop window service.

The drop state is recomputed from the clock on every call; nothing about
it is stored. Only the first window in the stored sequence counts.
"""

from datetime import datetime
from typing import Callable, Optional

from shared.database import JsonDocumentStore
from shared.models import ensure_utc, utc_now

from .models import DropPhase, DropState, DropWindow, NO_WINDOW_MESSAGE

DROP_WINDOWS = "dropWindows"


def derive_drop_state(window: Optional[DropWindow], now: datetime) -> DropState:
    """
    Place now relative to a window.

    Both ends are inclusive: now == start_at and now == end_at are live.
    """
    if window is None:
        return DropState(state=DropPhase.WAITLIST, message=NO_WINDOW_MESSAGE)
    if now < window.start_at:
        return DropState(state=DropPhase.WAITLIST, message=window.waitlist_copy, window=window)
    if now <= window.end_at:
        return DropState(state=DropPhase.LIVE, message=window.live_copy, window=window)
    return DropState(state=DropPhase.POST, message=window.post_copy, window=window)


class DropService:
    """Reads drop windows from the store and derives the current state."""

    def __init__(
        self,
        db: JsonDocumentStore,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._db = db
        self._clock = clock
        self._windows = db.collection(DROP_WINDOWS, DropWindow)

    def get_drop_state(self, now: Optional[datetime] = None) -> DropState:
        """Current drop state; now defaults to the service clock."""
        now = ensure_utc(now if now is not None else self._clock())
        with self._db.lock:
            return derive_drop_state(self._windows.first(), now)
