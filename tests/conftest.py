"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json

import pytest

from intent_analyzer.application.errors import ModelCallError
from intent_analyzer.application.ports.model_gateway import (
    GatewayReply,
    GatewayRequest,
    ModelGatewayPort,
)
from intent_analyzer.config import Settings


class FakeGateway(ModelGatewayPort):
    """In-memory gateway: returns a canned reply or raises a canned error."""

    def __init__(
        self,
        reply: GatewayReply | None = None,
        error: Exception | None = None,
        healthy: bool | None = None,
    ):
        self._reply = reply
        self._error = error
        self._healthy = healthy
        self.requests: list[GatewayRequest] = []
        self.health_checks = 0

    async def analyze(self, request):
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        return self._reply

    async def is_healthy(self):
        self.health_checks += 1
        if self._healthy is not None:
            return self._healthy
        return self._error is None


@pytest.fixture
def reply_payload():
    return {
        "intent_type": "report_issue",
        "domain_specific_intent": "server_outage",
        "keywords": [
            {"text": "서버", "weight": 0.9, "category": "technical"},
            {"text": "멈춰요", "weight": 0.8, "category": "action"},
        ],
        "priority": "P1",
        "confidence": 0.92,
        "emotional_tone": "urgent",
        "urgency_indicators": ["급해요"],
        "reasoning": "The user reports a recurring server freeze and asks for urgent help.",
        "intent_scores": {"report_issue": 0.8, "request_help": 0.2},
    }


@pytest.fixture
def gateway_reply(reply_payload):
    reply = GatewayReply.model_validate_json(json.dumps(reply_payload))
    reply.processing_time_ms = 120
    return reply


@pytest.fixture
def fake_gateway(gateway_reply):
    return FakeGateway(reply=gateway_reply)


@pytest.fixture
def failing_gateway():
    return FakeGateway(error=ModelCallError("Gemini generation failed: 429 RESOURCE_EXHAUSTED quota"))


@pytest.fixture
def settings():
    return Settings(
        GEMINI_PROJECT_ID="test-project",
        GEMINI_MODEL_NAME="gemini-test",
        _env_file=None,
    )
