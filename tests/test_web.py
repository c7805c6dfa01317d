"""
Tests for the Flask REST API.
"""
import gc

import pytest

from troubleshoot_kb import TroubleshootApp, TroubleshootConfig
from troubleshoot_kb.web import create_app


@pytest.fixture
def engine(kb_path):
    engine = TroubleshootApp(TroubleshootConfig(kb_path=kb_path, log_unknown_queries=False))
    engine.initialize()
    return engine


@pytest.fixture
def client(engine):
    app = create_app(engine, enable_rate_limit=False)
    app.config["TESTING"] = True
    return app.test_client()


class TestAskEndpoint:
    """Test POST /api/ask."""

    def test_error_code_match(self, client):
        response = client.post("/api/ask", json={"query": "error 404"})

        assert response.status_code == 200
        data = response.get_json()
        assert data["found"] is True
        assert data["error"] == "404 Not Found"
        assert data["confidence"] == 0.98
        assert data["matchStrategy"] == "error_code"
        assert data["solution"]
        assert data["intents"] == ["error_resolution"]
        assert data["processedQuery"].startswith("error 404")

    def test_wifi(self, client):
        data = client.post("/api/ask", json={"query": "WiFi not working"}).get_json()

        assert data["error"] == "Cannot Connect to Wi-Fi"
        assert "network_issue" in data["intents"]

    def test_unknown_query(self, client):
        response = client.post("/api/ask", json={"query": "quantum zebra"})

        assert response.status_code == 200
        data = response.get_json()
        assert data["found"] is False
        assert data["confidence"] == 0
        assert data["error"] == "Solution Not Available"
        assert data["matchStrategy"] is None

    @pytest.mark.parametrize("body", [{}, {"query": ""}, {"query": "   "}, {"query": 42}])
    def test_query_required(self, client, body):
        response = client.post("/api/ask", json=body)

        assert response.status_code == 400
        assert response.get_json() == {"error": "Query is required", "found": False}

    def test_invalid_json(self, client):
        response = client.post("/api/ask", data="not json", content_type="text/plain")

        assert response.status_code == 400
        assert response.get_json()["error"] == "Invalid JSON in request body"

    def test_query_too_long(self, client):
        response = client.post("/api/ask", json={"query": "a" * 501})

        assert response.status_code == 400
        assert "maximum length" in response.get_json()["error"]

    def test_internal_error(self, client, engine, monkeypatch):
        def boom(query):
            raise RuntimeError("resolver exploded")

        monkeypatch.setattr(engine, "ask", boom)

        response = client.post("/api/ask", json={"query": "wifi"})

        assert response.status_code == 500
        assert response.get_json()["error"] == "Internal server error: resolver exploded"

    def test_get_not_allowed(self, client):
        assert client.get("/api/ask").status_code == 405


class TestInfoEndpoints:
    """Test banner, health and KB info."""

    def test_index(self, client):
        data = client.get("/").get_json()

        assert data["version"] == "1.0.0"
        assert data["endpoints"]["ask"] == "POST /api/ask"

    def test_health(self, client):
        data = client.get("/api/health").get_json()

        assert data["status"] == "healthy"
        assert data["kbEntries"] == 13

    def test_kb_info(self, client):
        data = client.get("/api/kb").get_json()

        assert data["entries"] == 13
        assert "Cannot" in data["categories"]


def test_rate_limit_on_ask(engine):
    client = create_app(engine).test_client()

    statuses = [
        client.post("/api/ask", json={"query": "error 404"}).status_code
        for _ in range(31)
    ]

    assert statuses[:30] == [200] * 30
    assert statuses[30] == 429


def test_ask_works_with_rate_limit_disabled(engine):
    """Test that the disabled limiter survives garbage collection after app creation."""
    client = create_app(engine, enable_rate_limit=False).test_client()
    gc.collect()

    response = client.post("/api/ask", json={"query": "error 404"})

    assert response.status_code == 200
    assert response.get_json()["found"] is True


class TestCorsHeaders:
    """Test CORS headers for browser clients."""

    def test_allowed_origin(self, client):
        response = client.get("/api/health", headers={"Origin": "http://localhost:3000"})

        assert response.headers["Access-Control-Allow-Origin"] == "http://localhost:3000"
        assert response.headers["Access-Control-Allow-Credentials"] == "true"
        assert "POST" in response.headers["Access-Control-Allow-Methods"]

    def test_unknown_origin(self, client):
        response = client.get("/api/health", headers={"Origin": "http://evil.example"})

        assert "Access-Control-Allow-Origin" not in response.headers

    def test_preflight(self, client):
        response = client.options("/api/ask", headers={
            "Origin": "http://127.0.0.1:3000",
            "Access-Control-Request-Method": "POST",
        })

        assert response.status_code == 200
        assert response.headers["Access-Control-Allow-Origin"] == "http://127.0.0.1:3000"

    def test_configured_origins(self, kb_path):
        engine = TroubleshootApp(TroubleshootConfig(
            kb_path=kb_path,
            log_unknown_queries=False,
            cors_origins=("https://helpdesk.example",),
        ))
        engine.initialize()
        client = create_app(engine, enable_rate_limit=False).test_client()

        allowed = client.get("/", headers={"Origin": "https://helpdesk.example"})
        default = client.get("/", headers={"Origin": "http://localhost:3000"})

        assert allowed.headers["Access-Control-Allow-Origin"] == "https://helpdesk.example"
        assert "Access-Control-Allow-Origin" not in default.headers
