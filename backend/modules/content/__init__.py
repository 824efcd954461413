"""
Content module.

Landing-page field notes and testimonials.

Public API:
- IContentService: Interface for content CRUD
- ContentService: Store-backed implementation
- FieldNote, Testimonial: Stored records
"""

from .interfaces import IContentService
from .models import (
    FieldNote,
    FieldNoteCreate,
    FieldNoteUpdate,
    Testimonial,
    TestimonialCreate,
    TestimonialUpdate,
)
from .seed import default_field_notes
from .service import ContentService, FIELD_NOTES, TESTIMONIALS

__all__ = [
    # Interfaces
    "IContentService",
    # Models
    "FieldNote",
    "FieldNoteCreate",
    "FieldNoteUpdate",
    "Testimonial",
    "TestimonialCreate",
    "TestimonialUpdate",
    # Service
    "ContentService",
    "FIELD_NOTES",
    "TESTIMONIALS",
    "default_field_notes",
]
