"""
Public content endpoints.

Editing lives under the admin router.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_content_service

from .interfaces import IContentService
from .models import FieldNote, Testimonial

router = APIRouter()


@router.get("/field-notes", response_model=list[FieldNote])
async def list_field_notes(
    service: IContentService = Depends(get_content_service),
) -> list[FieldNote]:
    """Active field notes."""
    return service.list_field_notes()


@router.get("/testimonials", response_model=list[Testimonial])
async def list_testimonials(
    service: IContentService = Depends(get_content_service),
) -> list[Testimonial]:
    """All testimonials, including inactive ones."""
    return service.list_testimonials()
