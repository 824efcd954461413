"""
Drop window a fresh store starts with.
"""

import uuid
from datetime import datetime, timedelta

from .models import DropWindow

DEFAULT_WINDOW_NAME = "Drop 01"
DEFAULT_WAITLIST_COPY = "Waitlist only. Confirm your spot to get first access."
DEFAULT_LIVE_COPY = "Drop window is live. Secure your SNOOOM Hoodie now."
DEFAULT_POST_COPY = "This drop is closed. Join the list for the next run."


def default_drop_window(now: datetime, offset_days: int = 7, length_days: int = 1) -> DropWindow:
    """A single window opening offset_days from now."""
    start = now + timedelta(days=offset_days)
    return DropWindow(
        id=str(uuid.uuid4()),
        name=DEFAULT_WINDOW_NAME,
        start_at=start,
        end_at=start + timedelta(days=length_days),
        waitlist_copy=DEFAULT_WAITLIST_COPY,
        live_copy=DEFAULT_LIVE_COPY,
        post_copy=DEFAULT_POST_COPY,
    )
