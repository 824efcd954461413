"""Tests for the drop state endpoint."""


class TestDropStateEndpoint:
    def test_seeded_window_is_upcoming(self, client):
        """The seeded window opens a week out, so the list is still in waitlist mode."""
        response = client.get("/api/drop-state")

        assert response.status_code == 200
        data = response.json()
        assert data["state"] == "waitlist"
        assert data["message"] == "Waitlist only. Confirm your spot to get first access."
        assert data["window"]["name"] == "Drop 01"
        assert data["window"]["startAt"].endswith("Z")
