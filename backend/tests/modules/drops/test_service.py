"""Tests for drop window state."""

from datetime import datetime, timedelta, timezone

import pytest

from modules.drops.models import DropPhase, DropWindow, NO_WINDOW_MESSAGE
from modules.drops.seed import (
    DEFAULT_LIVE_COPY,
    DEFAULT_POST_COPY,
    DEFAULT_WAITLIST_COPY,
    default_drop_window,
)
from modules.drops.service import DROP_WINDOWS, DropService, derive_drop_state
from shared.database import JsonDocumentStore

START = datetime(2026, 3, 8, 12, 0, 0, tzinfo=timezone.utc)
END = datetime(2026, 3, 9, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def window() -> DropWindow:
    return DropWindow(
        id="w1",
        name="Drop 01",
        start_at=START,
        end_at=END,
        waitlist_copy="Soon.",
        live_copy="Now.",
        post_copy="Gone.",
    )


class TestDeriveDropState:
    def test_no_window(self):
        state = derive_drop_state(None, START)
        assert state.state is DropPhase.WAITLIST
        assert state.message == NO_WINDOW_MESSAGE
        assert state.window is None

    @pytest.mark.parametrize(
        "now, phase, message",
        [
            (START - timedelta(milliseconds=1), DropPhase.WAITLIST, "Soon."),
            (START, DropPhase.LIVE, "Now."),
            (START + timedelta(hours=6), DropPhase.LIVE, "Now."),
            (END, DropPhase.LIVE, "Now."),
            (END + timedelta(milliseconds=1), DropPhase.POST, "Gone."),
        ],
    )
    def test_phases_with_inclusive_bounds(self, window, now, phase, message):
        """Both window bounds should count as live."""
        state = derive_drop_state(window, now)
        assert state.state is phase
        assert state.message == message
        assert state.window == window


class TestDropService:
    def test_no_windows(self, drop_service):
        assert drop_service.get_drop_state().message == NO_WINDOW_MESSAGE

    def test_uses_first_window_only(self, store_path, clock):
        first = default_drop_window(clock(), offset_days=7)
        later = default_drop_window(clock(), offset_days=-30)
        store_path.parent.mkdir(parents=True)
        store_path.write_text(
            JsonDocumentStore._serialize(
                {DROP_WINDOWS: [first.to_document(), later.to_document()]}
            ),
            encoding="utf-8",
        )
        service = DropService(JsonDocumentStore(store_path), clock=clock)

        state = service.get_drop_state()
        assert state.state is DropPhase.WAITLIST
        assert state.window.id == first.id

    def test_follows_clock(self, store_path, clock):
        window = default_drop_window(clock(), offset_days=7, length_days=1)
        store_path.parent.mkdir(parents=True)
        store_path.write_text(
            JsonDocumentStore._serialize({DROP_WINDOWS: [window.to_document()]}),
            encoding="utf-8",
        )
        service = DropService(JsonDocumentStore(store_path), clock=clock)

        assert service.get_drop_state().message == DEFAULT_WAITLIST_COPY
        clock.advance(days=7)
        assert service.get_drop_state().message == DEFAULT_LIVE_COPY
        clock.advance(days=1, milliseconds=1)
        assert service.get_drop_state().message == DEFAULT_POST_COPY

    def test_explicit_now_overrides_clock(self, store_path, clock):
        window = default_drop_window(clock())
        store_path.parent.mkdir(parents=True)
        store_path.write_text(
            JsonDocumentStore._serialize({DROP_WINDOWS: [window.to_document()]}),
            encoding="utf-8",
        )
        service = DropService(JsonDocumentStore(store_path), clock=clock)

        naive_live = (window.start_at + timedelta(hours=1)).replace(tzinfo=None)
        assert service.get_drop_state(naive_live).state is DropPhase.LIVE


class TestDefaultDropWindow:
    def test_opens_a_week_out_for_one_day(self, clock):
        window = default_drop_window(clock())
        assert window.start_at == clock() + timedelta(days=7)
        assert window.end_at == window.start_at + timedelta(days=1)
        assert window.name == "Drop 01"
