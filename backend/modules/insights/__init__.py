"""
Insights module.

Analytics event log and dashboard aggregates.

Public API:
- InsightsService: Event logging and aggregate queries
- Event, EventSummary, DayCount, ReferralStanding: Models
"""

from .models import DayCount, Event, EventCreate, EventSummary, ReferralStanding
from .service import EVENTS, InsightsService

__all__ = [
    "DayCount",
    "Event",
    "EventCreate",
    "EventSummary",
    "ReferralStanding",
    "EVENTS",
    "InsightsService",
]
