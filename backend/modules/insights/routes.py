"""
Public insights endpoints and the event collector.

The referral leaderboard and event summary are admin-only and live under
the admin router.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.dependencies import get_insights_service

from .models import DayCount, EventCreate
from .service import InsightsService

router = APIRouter()


class EventLoggedResponse(BaseModel):
    status: str = "logged"


@router.get("/insights/sizes", response_model=dict[str, int])
async def size_counts(
    service: InsightsService = Depends(get_insights_service),
) -> dict[str, int]:
    """Signups per garment size."""
    return service.size_counts()


@router.get("/insights/signups", response_model=list[DayCount])
async def signup_timeline(
    service: InsightsService = Depends(get_insights_service),
) -> list[DayCount]:
    """Signups per UTC day, oldest first."""
    return service.signup_timeline()


@router.post("/events", response_model=EventLoggedResponse, status_code=201)
async def log_event(
    request: EventCreate,
    service: InsightsService = Depends(get_insights_service),
) -> EventLoggedResponse:
    """Record a client analytics event."""
    service.log_event(request.type, user_id=request.user_id, metadata=request.metadata)
    return EventLoggedResponse()
