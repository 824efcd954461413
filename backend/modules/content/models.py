"""
Content module data models.

Field notes and testimonials are short, author-attributed quotes shown on
the landing page.
"""

from typing import Optional

from pydantic import Field

from shared.models import CamelModel, StoreRecord, Timestamp


class FieldNote(StoreRecord):
    """A landing-page field note. order is assigned at creation."""

    quote: str
    author: str
    active: bool = True
    order: int = Field(default=0, ge=0)
    created_at: Timestamp
    updated_at: Optional[Timestamp] = None


class Testimonial(StoreRecord):
    """A customer testimonial."""

    quote: str
    author: str
    role: str = ""
    active: bool = True
    created_at: Timestamp
    updated_at: Optional[Timestamp] = None


class FieldNoteCreate(CamelModel):
    quote: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)
    active: bool = True


class FieldNoteUpdate(CamelModel):
    """Partial update; only fields present in the request are applied."""

    quote: Optional[str] = Field(None, min_length=1)
    author: Optional[str] = Field(None, min_length=1)
    active: Optional[bool] = None
    order: Optional[int] = Field(None, ge=0)


class TestimonialCreate(CamelModel):
    quote: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)
    role: str = ""
    active: bool = True


class TestimonialUpdate(CamelModel):
    """Partial update; only fields present in the request are applied."""

    quote: Optional[str] = Field(None, min_length=1)
    author: Optional[str] = Field(None, min_length=1)
    role: Optional[str] = None
    active: Optional[bool] = None
