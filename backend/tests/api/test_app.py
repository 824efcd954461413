"""Tests for application wiring: startup seeding and error mapping."""

import json

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import build_default_document, get_container
from api.models.errors import status_for
from shared.database import StoreLoadError, StoreWriteError
from shared.exceptions import AuthenticationError, WaitlistError


class TestStartup:
    def test_seeds_missing_store(self, app_env):
        """Opening the app on a missing file should write the seed document."""
        with TestClient(create_app()):
            pass

        document = json.loads(app_env.read_text(encoding="utf-8"))
        assert document["signups"] == []
        assert document["testimonials"] == []
        assert document["events"] == []
        assert len(document["fieldNotes"]) == 20
        assert len(document["dropWindows"]) == 1

    def test_does_not_reseed_existing_store(self, app_env):
        app_env.parent.mkdir(parents=True)
        app_env.write_text(json.dumps({"fieldNotes": []}), encoding="utf-8")

        with TestClient(create_app()) as client:
            assert client.get("/api/field-notes").json() == []
            assert client.get("/api/drop-state").json()["message"] == "Waitlist only"

    def test_corrupt_store_fails_to_open(self, app_env):
        """The store the app opens at startup should refuse a corrupt file."""
        app_env.parent.mkdir(parents=True)
        app_env.write_text("{broken", encoding="utf-8")

        with pytest.raises(StoreLoadError):
            get_container().store


class TestDefaultDocument:
    def test_collections(self):
        document = build_default_document()
        assert set(document) == {"signups", "fieldNotes", "testimonials", "dropWindows", "events"}
        assert document["dropWindows"][0]["name"] == "Drop 01"


class TestErrorMapping:
    @pytest.mark.parametrize(
        "error, status_code",
        [
            (AuthenticationError("x"), 401),
            (StoreWriteError("/tmp/store.json", "disk full"), 500),
            (WaitlistError("x"), 500),
        ],
    )
    def test_status_for(self, error, status_code):
        assert status_for(error) == status_code

    def test_write_failure_returns_500(self, client, monkeypatch):
        """A failed store write should surface as a 500 with the error body."""
        store = get_container().store

        def fail(document):
            raise StoreWriteError(str(store.path), "disk full")

        monkeypatch.setattr(store, "_write", fail)
        response = client.post(
            "/api/signups",
            json={"name": "Ann", "email": "ann@example.com", "size": "M"},
        )

        assert response.status_code == 500
        assert response.json()["error"] == "STORE_WRITE_FAILED"
        assert get_container().signups.get_by_email("ann@example.com") is None
