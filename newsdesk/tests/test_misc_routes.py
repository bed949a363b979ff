"""
Tests for misc routes and app-wide behaviour.
"""

from newsdesk.config import config


class TestHealthCheck:
    """Tests for /status endpoint."""

    def test_health_check_returns_ok(self, client):
        response = client.get("/status")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert "version" in data
        assert data["store_configured"] is True
        assert data["ranking_enabled"] is True

    def test_health_check_shows_ranking_disabled(self, client_without_llm):
        """Ranking is disabled when no OpenAI key is configured."""
        data = client_without_llm.get("/status").json()
        assert data["ranking_enabled"] is False


class TestErrorShape:
    """All errors share the {message} body."""

    def test_unknown_route(self, client):
        response = client.get("/nope")
        assert response.status_code == 404
        assert "message" in response.json()

    def test_malformed_json(self, client):
        response = client.post(
            "/validate-feed",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["message"].startswith("Invalid request")


class TestCORS:
    """Tests for the cross-origin policy."""

    def test_allowed_origin(self, client):
        response = client.options(
            "/check-scan",
            headers={
                "Origin": config.CORS_ORIGIN,
                "Access-Control-Request-Method": "GET",
            },
        )
        assert response.headers.get("access-control-allow-origin") == config.CORS_ORIGIN

    def test_other_origin(self, client):
        response = client.get("/check-scan", headers={"Origin": "https://evil.example"})
        assert "access-control-allow-origin" not in response.headers
