"""
Insights service implementation.

Owns the event log and answers the aggregate queries behind the admin
dashboard. Aggregates are computed from scratch on every call.
"""

import logging
import uuid
from collections import Counter
from datetime import datetime
from typing import Any, Callable, Iterable, Optional

from shared.database import JsonDocumentStore
from shared.models import utc_day, utc_now
from modules.signups.repository import SignupRepository

from .models import DayCount, Event, EventSummary, ReferralStanding

logger = logging.getLogger(__name__)

EVENTS = "events"


def _by_day(timestamps: Iterable[datetime]) -> list[DayCount]:
    counts = Counter(utc_day(ts) for ts in timestamps)
    return [DayCount(date=day, count=counts[day]) for day in sorted(counts)]


class InsightsService:
    """Event logging and read-only aggregates over signups and events."""

    def __init__(
        self,
        db: JsonDocumentStore,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._db = db
        self._clock = clock
        self._signups = SignupRepository(db)
        self._events = db.collection(EVENTS, Event)

    # -------------------------------------------------------------------------
    # Event log
    # -------------------------------------------------------------------------

    def log_event(
        self,
        type: str,
        user_id: Optional[str] = None,
        metadata: Optional[dict[str, Any]] = None,
    ) -> Event:
        """Append an event to the log."""
        with self._db.transaction():
            event = self._events.add(
                Event(
                    id=str(uuid.uuid4()),
                    type=type,
                    user_id=user_id,
                    metadata=metadata or {},
                    created_at=self._clock(),
                )
            )
        logger.debug(f"Logged event {event.type}")
        return event

    def event_summary(self) -> EventSummary:
        with self._db.lock:
            events = list(self._events)
        return EventSummary(
            by_type=dict(Counter(event.type for event in events)),
            by_day=_by_day(event.created_at for event in events),
        )

    # -------------------------------------------------------------------------
    # Signup aggregates
    # -------------------------------------------------------------------------

    def size_counts(self) -> dict[str, int]:
        """Number of signups per garment size."""
        with self._db.lock:
            return dict(Counter(signup.size for signup in self._signups.list_all()))

    def signup_timeline(self) -> list[DayCount]:
        """Signups per UTC day, oldest day first."""
        with self._db.lock:
            signups = self._signups.list_all()
        return _by_day(signup.created_at for signup in signups)

    def referral_leaderboard(self, limit: int = 10) -> list[ReferralStanding]:
        """
        Top referrers by referral count.

        sorted() is stable, so equal counts keep creation order.
        """
        with self._db.lock:
            signups = self._signups.list_all()
        ranked = sorted(signups, key=lambda s: s.referral_count, reverse=True)
        return [
            ReferralStanding(
                name=s.name,
                email=s.email,
                referral_count=s.referral_count,
                referral_code=s.referral_code,
            )
            for s in ranked[: max(limit, 0)]
        ]
