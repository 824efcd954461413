"""
Insights module data models.

The event log record plus the read-only aggregate views computed from
signups and events.
"""

from typing import Any, Optional

from pydantic import Field, field_validator

from shared.models import CamelModel, StoreRecord, Timestamp


class Event(StoreRecord):
    """Append-only analytics event. Never updated or deleted."""

    type: str
    user_id: Optional[str] = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: Timestamp


class EventCreate(CamelModel):
    """Client-reported event."""

    type: str = Field(..., min_length=1, max_length=100)
    user_id: Optional[str] = None
    metadata: Optional[dict[str, Any]] = Field(default_factory=dict)

    @field_validator("metadata", mode="before")
    @classmethod
    def null_metadata_is_empty(cls, value):
        return {} if value is None else value


class DayCount(CamelModel):
    """Count for one UTC calendar day (YYYY-MM-DD)."""

    date: str
    count: int


class ReferralStanding(CamelModel):
    """Leaderboard row."""

    name: str
    email: str
    referral_count: int
    referral_code: str


class EventSummary(CamelModel):
    """Event counts by type and by UTC day."""

    by_type: dict[str, int] = Field(default_factory=dict)
    by_day: list[DayCount] = Field(default_factory=list)
