"""Tests for the content service."""

import json
from datetime import datetime, timezone

import modules.content.models as content_models
from modules.content.seed import DEFAULT_FIELD_NOTES, default_field_notes
from modules.content.service import ContentService
from shared.database import JsonDocumentStore


def note(quote="Heavy and soft.", author="Ann · Designer", **kwargs):
    return content_models.FieldNoteCreate(quote=quote, author=author, **kwargs)


def make_testimonial(**kwargs):
    data = {"quote": "Best hoodie.", "author": "Bo"}
    data.update(kwargs)
    return content_models.TestimonialCreate(**data)


class TestFieldNotes:
    def test_add_assigns_order_by_position(self, content_service, clock):
        first = content_service.add_field_note(note("One"))
        second = content_service.add_field_note(note("Two"))

        assert first.order == 0
        assert second.order == 1
        assert first.created_at == clock()
        assert first.updated_at is None

    def test_list_hides_inactive(self, content_service):
        """Inactive notes should not be listed."""
        content_service.add_field_note(note("Visible"))
        content_service.add_field_note(note("Hidden", active=False))

        assert [n.quote for n in content_service.list_field_notes()] == ["Visible"]

    def test_update_merges_fields(self, content_service, clock):
        created = content_service.add_field_note(note("Draft"))
        clock.advance(minutes=10)

        updated = content_service.update_field_note(
            created.id, content_models.FieldNoteUpdate(quote="Final")
        )

        assert updated.quote == "Final"
        assert updated.author == created.author
        assert updated.order == created.order
        assert updated.updated_at == clock()

    def test_update_can_deactivate(self, content_service):
        created = content_service.add_field_note(note())
        content_service.update_field_note(created.id, content_models.FieldNoteUpdate(active=False))
        assert content_service.list_field_notes() == []

    def test_update_unknown_id(self, content_service):
        assert content_service.update_field_note(
            "missing", content_models.FieldNoteUpdate(quote="x")
        ) is None

    def test_delete(self, content_service):
        created = content_service.add_field_note(note())
        assert content_service.delete_field_note(created.id) is True
        assert content_service.delete_field_note(created.id) is False
        assert content_service.list_field_notes() == []

    def test_order_after_delete_uses_current_count(self, content_service):
        """order follows the number of notes present at creation time."""
        first = content_service.add_field_note(note("One"))
        content_service.add_field_note(note("Two"))
        content_service.delete_field_note(first.id)

        assert content_service.add_field_note(note("Three")).order == 1

    def test_persists(self, content_service, store_path):
        content_service.add_field_note(note("Saved"))
        rows = json.loads(store_path.read_text(encoding="utf-8"))["fieldNotes"]
        assert rows[0]["quote"] == "Saved"
        assert rows[0]["createdAt"] == "2026-03-01T12:00:00.000Z"

    def test_update_stamp_matches_reloaded_record(self, content_service, store_path, clock):
        """updated_at should survive a reload unchanged, even off a sub-millisecond clock."""
        created = content_service.add_field_note(note("Draft"))
        clock.set(datetime(2026, 3, 1, 12, 0, 0, 456789, tzinfo=timezone.utc))
        updated = content_service.update_field_note(
            created.id, content_models.FieldNoteUpdate(quote="Final")
        )

        reloaded = ContentService(JsonDocumentStore(store_path), clock=clock)
        assert reloaded.list_field_notes() == [updated]
        assert updated.updated_at.microsecond == 456000


class TestTestimonials:
    def test_list_includes_inactive(self, content_service):
        """Testimonials are listed whether active or not."""
        content_service.add_testimonial(make_testimonial(quote="On"))
        content_service.add_testimonial(make_testimonial(quote="Off", active=False))

        assert [t.quote for t in content_service.list_testimonials()] == ["On", "Off"]

    def test_add_defaults(self, content_service):
        created = content_service.add_testimonial(make_testimonial())
        assert created.role == ""
        assert created.active is True

    def test_update_and_delete(self, content_service):
        created = content_service.add_testimonial(make_testimonial())
        updated = content_service.update_testimonial(
            created.id, content_models.TestimonialUpdate(role="Stylist")
        )
        assert updated.role == "Stylist"
        assert updated.quote == created.quote

        assert content_service.delete_testimonial(created.id) is True
        assert content_service.list_testimonials() == []

    def test_update_unknown_id(self, content_service):
        assert content_service.update_testimonial(
            "missing", content_models.TestimonialUpdate(role="x")
        ) is None


class TestSeed:
    def test_default_field_notes(self, clock):
        notes = default_field_notes(clock())

        assert len(notes) == len(DEFAULT_FIELD_NOTES) == 20
        assert [n.order for n in notes] == list(range(20))
        assert all(n.active for n in notes)
        assert len({n.id for n in notes}) == 20
