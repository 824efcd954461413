"""
Admin endpoints.

Every route here requires the admin token (see api.middleware.auth).
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from api.dependencies import (
    get_content_service,
    get_insights_service,
    get_signup_service,
)
from api.middleware.auth import require_admin
from api.models.errors import ErrorResponse
from modules.content.interfaces import IContentService
from modules.content.models import (
    FieldNote,
    FieldNoteCreate,
    FieldNoteUpdate,
    Testimonial,
    TestimonialCreate,
    TestimonialUpdate,
)
from modules.insights.models import EventSummary, ReferralStanding
from modules.insights.service import InsightsService
from modules.signups.export import signups_to_csv
from modules.signups.interfaces import ISignupService
from modules.signups.models import Signup, SignupFilter
from shared.config import Settings, get_settings

EXPORT_FILENAME = "snooom-signups.csv"

router = APIRouter(
    dependencies=[Depends(require_admin)],
    responses={401: {"model": ErrorResponse, "description": "Missing or wrong admin token"}},
)


# -----------------------------------------------------------------------------
# Signups
# -----------------------------------------------------------------------------


@router.get("/signups", response_model=list[Signup])
async def list_signups(
    size: Optional[str] = Query(default=None),
    confirmed: Optional[bool] = Query(default=None),
    start: Optional[str] = Query(default=None, description="ISO-8601 lower bound on createdAt"),
    end: Optional[str] = Query(default=None, description="ISO-8601 upper bound on createdAt"),
    service: ISignupService = Depends(get_signup_service),
) -> list[Signup]:
    """Signups matching every given filter."""
    return service.list_signups(
        SignupFilter(size=size or None, confirmed=confirmed, start=start or None, end=end or None)
    )


@router.get("/export")
async def export_signups(
    service: ISignupService = Depends(get_signup_service),
) -> Response:
    """All signups as a CSV download."""
    return Response(
        content=signups_to_csv(service.list_signups()),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )


@router.get("/referrals", response_model=list[ReferralStanding])
async def referral_leaderboard(
    limit: Optional[int] = Query(default=None, ge=1, le=1000),
    service: InsightsService = Depends(get_insights_service),
    settings: Settings = Depends(get_settings),
) -> list[ReferralStanding]:
    """Top referrers."""
    return service.referral_leaderboard(limit or settings.referral_leaderboard_limit)


@router.get("/events", response_model=EventSummary)
async def event_summary(
    service: InsightsService = Depends(get_insights_service),
) -> EventSummary:
    """Event counts by type and by day."""
    return service.event_summary()


# -----------------------------------------------------------------------------
# Field notes
# -----------------------------------------------------------------------------


@router.post("/field-notes", response_model=FieldNote, status_code=201)
async def create_field_note(
    request: FieldNoteCreate,
    service: IContentService = Depends(get_content_service),
) -> FieldNote:
    return service.add_field_note(request)


@router.put("/field-notes/{note_id}", response_model=FieldNote)
async def update_field_note(
    note_id: str,
    request: FieldNoteUpdate,
    service: IContentService = Depends(get_content_service),
) -> FieldNote:
    note = service.update_field_note(note_id, request)
    if note is None:
        raise HTTPException(status_code=404, detail="Not found")
    return note


@router.delete("/field-notes/{note_id}", status_code=204)
async def delete_field_note(
    note_id: str,
    service: IContentService = Depends(get_content_service),
) -> None:
    if not service.delete_field_note(note_id):
        raise HTTPException(status_code=404, detail="Not found")


# -----------------------------------------------------------------------------
# Testimonials
# -----------------------------------------------------------------------------


@router.post("/testimonials", response_model=Testimonial, status_code=201)
async def create_testimonial(
    request: TestimonialCreate,
    service: IContentService = Depends(get_content_service),
) -> Testimonial:
    return service.add_testimonial(request)


@router.put("/testimonials/{testimonial_id}", response_model=Testimonial)
async def update_testimonial(
    testimonial_id: str,
    request: TestimonialUpdate,
    service: IContentService = Depends(get_content_service),
) -> Testimonial:
    testimonial = service.update_testimonial(testimonial_id, request)
    if testimonial is None:
        raise HTTPException(status_code=404, detail="Not found")
    return testimonial


@router.delete("/testimonials/{testimonial_id}", status_code=204)
async def delete_testimonial(
    testimonial_id: str,
    service: IContentService = Depends(get_content_service),
) -> None:
    if not service.delete_testimonial(testimonial_id):
        raise HTTPException(status_code=404, detail="Not found")
