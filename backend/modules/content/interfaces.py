"""
Content module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import (
    FieldNote,
    FieldNoteCreate,
    FieldNoteUpdate,
    Testimonial,
    TestimonialCreate,
    TestimonialUpdate,
)


@runtime_checkable
class IContentService(Protocol):
    """
    Interface for field note and testimonial CRUD.

    Unknown ids are reported as None (update) or False (delete).
    """

    def list_field_notes(self) -> list[FieldNote]:
        """Active field notes in stored order."""
        ...

    def add_field_note(self, data: FieldNoteCreate) -> FieldNote:
        ...

    def update_field_note(self, note_id: str, data: FieldNoteUpdate) -> Optional[FieldNote]:
        ...

    def delete_field_note(self, note_id: str) -> bool:
        ...

    def list_testimonials(self) -> list[Testimonial]:
        """All testimonials, active or not."""
        ...

    def add_testimonial(self, data: TestimonialCreate) -> Testimonial:
        ...

    def update_testimonial(
        self, testimonial_id: str, data: TestimonialUpdate
    ) -> Optional[Testimonial]:
        ...

    def delete_testimonial(self, testimonial_id: str) -> bool:
        ...
