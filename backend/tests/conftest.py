"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
a temporary document store, a controllable clock, and service instances
wired to both.
"""

import pytest
from datetime import datetime, timedelta, timezone

from shared.config import Settings, get_settings
from shared.database import JsonDocumentStore


TEST_ADMIN_TOKEN = "test-admin-token"


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now

    def set(self, now: datetime) -> None:
        self.now = now


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached process-wide; start and end every test clean."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of the environment cache."""
    return Settings()


@pytest.fixture
def clock() -> FakeClock:
    """Clock pinned to 2026-03-01 12:00 UTC."""
    return FakeClock(datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def store_path(tmp_path):
    """Location of the store file for this test."""
    return tmp_path / "data" / "store.json"


@pytest.fixture
def store(store_path) -> JsonDocumentStore:
    """Empty store backed by a temporary file."""
    return JsonDocumentStore(store_path)


@pytest.fixture
def signup_service(store, clock, settings):
    from modules.signups.service import SignupService
    return SignupService(store, clock=clock, settings=settings)


@pytest.fixture
def content_service(store, clock):
    from modules.content.service import ContentService
    return ContentService(store, clock=clock)


@pytest.fixture
def drop_service(store, clock):
    from modules.drops.service import DropService
    return DropService(store, clock=clock)


@pytest.fixture
def insights_service(store, clock):
    from modules.insights.service import InsightsService
    return InsightsService(store, clock=clock)


@pytest.fixture
def app_env(tmp_path, monkeypatch):
    """
    Point the application at a temporary store and a known admin token.

    Resets the service container so the app opens this store.
    """
    from api.dependencies import reset_container

    monkeypatch.setenv("DATA_FILE", str(tmp_path / "app" / "store.json"))
    monkeypatch.setenv("ADMIN_TOKEN", TEST_ADMIN_TOKEN)
    monkeypatch.setenv("APP_BASE_URL", "https://snooom.test")
    monkeypatch.setenv("RESEND_API_KEY", "")
    monkeypatch.setenv("EMAIL_FROM", "")
    get_settings.cache_clear()
    reset_container()
    yield tmp_path / "app" / "store.json"
    reset_container()


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"X-Admin-Token": TEST_ADMIN_TOKEN}


@pytest.fixture
def client(app_env):
    """TestClient for the real app on a temporary, seeded store."""
    from fastapi.testclient import TestClient
    from api.app import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
