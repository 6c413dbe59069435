"""Gemini adapter — implements ModelGatewayPort using google-genai."""

from __future__ import annotations

import logging
import time
from typing import Any

from google import genai

from intent_analyzer.adapters.llm.extraction import (
    extract_json_payload,
    extract_reply_text,
    parse_reply,
)
from intent_analyzer.adapters.llm.prompt import build_prompt
from intent_analyzer.application.errors import (
    ConfigurationError,
    IntentAnalysisError,
    ModelCallError,
    PayloadParseError,
)
from intent_analyzer.application.ports.model_gateway import (
    GatewayReply,
    GatewayRequest,
    ModelGatewayPort,
)
from intent_analyzer.config import Settings

logger = logging.getLogger(__name__)

HEALTH_CHECK_REQUEST = GatewayRequest(text="test", domain="health_check")


class GeminiGateway(ModelGatewayPort):
    """Gemini implementation of ModelGatewayPort.

    The client handle is created once and only read afterwards, so one
    gateway can serve concurrent requests.
    """

    def __init__(self, client: Any, model_name: str):
        self._client = client
        self._model_name = model_name

    @classmethod
    def from_settings(cls, settings: Settings) -> GeminiGateway:
        """Build a gateway on Vertex AI if a project is configured, else on the Developer API."""
        if settings.gemini_project_id:
            client = genai.Client(
                vertexai=True,
                project=settings.gemini_project_id,
                location=settings.gemini_location,
            )
            logger.info(
                "Vertex AI Gemini client initialized",
                extra={
                    "project_id": settings.gemini_project_id,
                    "location": settings.gemini_location,
                    "model": settings.gemini_model_name,
                },
            )
        elif settings.gemini_api_key:
            client = genai.Client(api_key=settings.gemini_api_key)
            logger.info(
                "Gemini Developer API client initialized",
                extra={"model": settings.gemini_model_name},
            )
        else:
            raise ConfigurationError("GEMINI_PROJECT_ID or GEMINI_API_KEY is required")

        return cls(client=client, model_name=settings.gemini_model_name)

    @property
    def model_name(self) -> str:
        return self._model_name

    async def analyze(self, request: GatewayRequest) -> GatewayReply:
        """Send the prompt to Gemini and parse the structured reply."""
        started = time.perf_counter()

        logger.info(
            "Analyzing intent with Gemini",
            extra={"domain": request.domain, "user": request.user_id},
        )

        prompt = build_prompt(request)

        try:
            response = await self._client.aio.models.generate_content(
                model=self._model_name,
                contents=prompt,
            )
        except Exception as e:
            logger.error("Gemini generation failed", extra={"error": str(e)})
            raise ModelCallError(f"Gemini generation failed: {e}") from e

        raw_text = extract_reply_text(response)
        logger.debug("Raw Gemini response: %s", raw_text)

        payload = extract_json_payload(raw_text)
        try:
            reply = parse_reply(payload)
        except PayloadParseError as e:
            logger.error(
                "Failed to parse JSON response",
                extra={"json_text": e.payload, "error": str(e)},
            )
            raise

        reply.processing_time_ms = int((time.perf_counter() - started) * 1000)

        logger.info(
            "Intent analysis completed with Gemini",
            extra={
                "intent": reply.intent_type,
                "confidence": reply.confidence,
                "duration": reply.processing_time_ms,
            },
        )
        return reply

    async def is_healthy(self) -> bool:
        """Run a real analysis call; every probe costs one model request."""
        try:
            await self.analyze(HEALTH_CHECK_REQUEST)
        except IntentAnalysisError:
            logger.warning("Gemini health check failed", exc_info=True)
            return False
        return True
