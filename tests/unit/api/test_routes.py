"""Tests for the HTTP endpoints via FastAPI's TestClient."""

import pytest
from fastapi.testclient import TestClient

from intent_analyzer.main import create_app


@pytest.fixture
def client(settings, fake_gateway):
    return TestClient(create_app(settings=settings, gateway=fake_gateway))


# ─── POST /api/intent/analyze ───────────────────────────────────────


def test_analyze_success(client, fake_gateway):
    response = client.post(
        "/api/intent/analyze",
        json={"text": "서버가 계속 멈춰요, 급해요", "domain": "infra"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["intent_type"] == "report_issue"
    assert body["priority"] == "PRIORITY_URGENT"
    assert body["emotional_tone"] == "TONE_URGENT"
    assert body["keywords"][0] == {"text": "서버", "weight": 0.9, "category": "technical"}
    assert body["urgency_indicators"] == ["급해요"]
    assert body["intent_scores"] == {"report_issue": 0.8, "request_help": 0.2}
    assert body["metrics"]["gemini_api_time_ms"] == 120
    assert body["metrics"]["model_version"] == "gemini-test"
    assert body["metrics"]["cache_hit"] is False
    assert body["metrics"]["cache_hit_count"] == 0
    assert len(fake_gateway.requests) == 1


def test_analyze_optional_fields_pass_through(client, fake_gateway):
    response = client.post(
        "/api/intent/analyze",
        json={
            "text": "still down",
            "user_id": "",
            "session_id": "",
            "context_messages": ["it froze yesterday", "rebooted"],
            "metadata": {"channel": "slack"},
        },
    )

    assert response.status_code == 200
    sent = fake_gateway.requests[0]
    assert sent.context_messages == ("it froze yesterday", "rebooted")
    assert sent.metadata == {"channel": "slack"}
    assert sent.domain == ""


def test_analyze_null_optionals_use_defaults(client, fake_gateway):
    response = client.post(
        "/api/intent/analyze",
        json={
            "text": "hi",
            "domain": None,
            "user_id": None,
            "session_id": None,
            "context_messages": None,
            "metadata": None,
        },
    )

    assert response.status_code == 200
    sent = fake_gateway.requests[0]
    assert sent.text == "hi"
    assert sent.domain == ""
    assert sent.user_id == ""
    assert sent.context_messages == ()
    assert sent.metadata == {}


@pytest.mark.parametrize(
    "payload",
    [{"text": ""}, {"domain": "infra"}, {"text": None, "domain": "infra"}],
)
def test_analyze_empty_text_is_rejected(client, fake_gateway, payload):
    response = client.post("/api/intent/analyze", json=payload)

    assert response.status_code == 400
    assert response.json()["detail"] == "text field is required"
    assert fake_gateway.requests == []


def test_analyze_internal_error_is_generic(settings, failing_gateway):
    client = TestClient(create_app(settings=settings, gateway=failing_gateway))

    response = client.post("/api/intent/analyze", json={"text": "hello"})

    assert response.status_code == 500
    assert response.json()["detail"] == "intent analysis failed"
    assert "RESOURCE_EXHAUSTED" not in response.text


# ─── GET /api/health ────────────────────────────────────────────────


def test_health_serving(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "SERVING"
    assert body["message"] == "Service is healthy"
    assert body["details"]["service"] == "intent-analyzer"
    assert body["details"]["version"] == "1.0.0"
    assert body["details"]["timestamp"]


def test_health_not_serving(settings, failing_gateway):
    client = TestClient(create_app(settings=settings, gateway=failing_gateway))

    body = client.get("/api/health").json()

    assert body["status"] == "NOT_SERVING"
    assert body["message"] == "Service is unhealthy"


def test_lifespan_keeps_injected_gateway(settings, fake_gateway):
    app = create_app(settings=settings, gateway=fake_gateway)
    with TestClient(app):
        assert app.state.model_gateway is fake_gateway
