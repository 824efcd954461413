"""
Content service implementation.

CRUD for the two landing-page content collections. Listing field notes
hides inactive ones; listing testimonials returns every record, active or
not, which is what the public page has always received.
"""

import logging
import uuid
from datetime import datetime
from typing import Callable, Optional, TypeVar

from pydantic import BaseModel

from shared.database import Collection, JsonDocumentStore
from shared.models import StoreRecord, ensure_utc, utc_now

from .interfaces import IContentService
from .models import (
    FieldNote,
    FieldNoteCreate,
    FieldNoteUpdate,
    Testimonial,
    TestimonialCreate,
    TestimonialUpdate,
)

logger = logging.getLogger(__name__)

FIELD_NOTES = "fieldNotes"
TESTIMONIALS = "testimonials"

R = TypeVar("R", bound=StoreRecord)


class ContentService(IContentService):
    """Field note and testimonial service backed by the document store."""

    def __init__(
        self,
        db: JsonDocumentStore,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._db = db
        self._clock = clock
        self._notes = db.collection(FIELD_NOTES, FieldNote)
        self._testimonials = db.collection(TESTIMONIALS, Testimonial)

    # -------------------------------------------------------------------------
    # Field notes
    # -------------------------------------------------------------------------

    def list_field_notes(self) -> list[FieldNote]:
        with self._db.lock:
            return [note for note in self._notes if note.active is not False]

    def add_field_note(self, data: FieldNoteCreate) -> FieldNote:
        with self._db.transaction():
            note = self._notes.add(
                FieldNote(
                    id=str(uuid.uuid4()),
                    quote=data.quote,
                    author=data.author,
                    active=data.active,
                    order=len(self._notes),
                    created_at=self._now(),
                )
            )
        logger.info(f"Added field note {note.id}")
        return note

    def update_field_note(self, note_id: str, data: FieldNoteUpdate) -> Optional[FieldNote]:
        return self._update(self._notes, note_id, data)

    def delete_field_note(self, note_id: str) -> bool:
        return self._delete(self._notes, note_id)

    # -------------------------------------------------------------------------
    # Testimonials
    # -------------------------------------------------------------------------

    def list_testimonials(self) -> list[Testimonial]:
        with self._db.lock:
            return list(self._testimonials)

    def add_testimonial(self, data: TestimonialCreate) -> Testimonial:
        with self._db.transaction():
            testimonial = self._testimonials.add(
                Testimonial(
                    id=str(uuid.uuid4()),
                    quote=data.quote,
                    author=data.author,
                    role=data.role,
                    active=data.active,
                    created_at=self._now(),
                )
            )
        logger.info(f"Added testimonial {testimonial.id}")
        return testimonial

    def update_testimonial(
        self, testimonial_id: str, data: TestimonialUpdate
    ) -> Optional[Testimonial]:
        return self._update(self._testimonials, testimonial_id, data)

    def delete_testimonial(self, testimonial_id: str) -> bool:
        return self._delete(self._testimonials, testimonial_id)

    # -------------------------------------------------------------------------
    # Shared CRUD helpers
    # -------------------------------------------------------------------------

    def _now(self) -> datetime:
        return ensure_utc(self._clock())

    def _update(
        self,
        collection: Collection[R],
        record_id: str,
        data: BaseModel,
    ) -> Optional[R]:
        """Shallow-merge the fields set on data and stamp updated_at."""
        with self._db.lock:
            current = collection.get(record_id)
            if current is None:
                return None
            changes = data.model_dump(exclude_unset=True, exclude_none=True)
            changes["updated_at"] = self._now()
            with self._db.transaction():
                updated = collection.replace(current.model_copy(update=changes))
        logger.info(f"Updated {collection.name} record {record_id}")
        return updated

    def _delete(self, collection: Collection[R], record_id: str) -> bool:
        with self._db.lock:
            if record_id not in collection:
                return False
            with self._db.transaction():
                collection.remove(record_id)
        logger.info(f"Deleted {collection.name} record {record_id}")
        return True
