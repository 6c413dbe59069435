"""AnalyzeIntentUseCase — translate between domain entities and the model gateway."""

from __future__ import annotations

import logging
import time

from intent_analyzer.application.errors import IntentAnalysisError
from intent_analyzer.application.ports.model_gateway import (
    GatewayKeyword,
    GatewayReply,
    GatewayRequest,
    ModelGatewayPort,
)
from intent_analyzer.domain.entities.analysis import (
    AnalysisRequest,
    AnalysisResult,
    Keyword,
    ProcessingMetrics,
)
from intent_analyzer.domain.value_objects.enums import priority_from_code, tone_from_code

logger = logging.getLogger(__name__)


class AnalyzeIntentUseCase:
    """Delegates one analysis to the gateway and builds an AnalysisResult."""

    def __init__(self, gateway: ModelGatewayPort, model_version: str):
        self._gateway = gateway
        self._model_version = model_version

    async def execute(self, request: AnalysisRequest) -> AnalysisResult:
        """Analyze a message.

        Gateway errors are logged and re-raised unchanged.
        """
        started = time.perf_counter()

        logger.info(
            "Starting intent analysis",
            extra={"domain": request.domain, "user_id": request.user_id, "session_id": request.session_id},
        )

        gateway_request = GatewayRequest(
            text=request.text,
            domain=request.domain,
            user_id=request.user_id,
            context_messages=tuple(request.context_messages),
            metadata=dict(request.metadata),
        )

        try:
            reply = await self._gateway.analyze(gateway_request)
        except IntentAnalysisError:
            logger.exception("Model gateway analysis failed")
            raise

        result = self._to_result(reply, started)

        logger.info(
            "Intent analysis completed",
            extra={
                "intent": result.intent_type,
                "confidence": result.confidence,
                "priority": result.priority.value,
                "processing_time": result.metrics.processing_time_ms,
            },
        )
        return result

    async def is_healthy(self) -> bool:
        return await self._gateway.is_healthy()

    def _to_result(self, reply: GatewayReply, started: float) -> AnalysisResult:
        keywords = tuple(_to_keyword(k) for k in reply.keywords)
        priority = priority_from_code(reply.priority)
        tone = tone_from_code(reply.emotional_tone)

        metrics = ProcessingMetrics(
            processing_time_ms=int((time.perf_counter() - started) * 1000),
            model_call_time_ms=reply.processing_time_ms,
            model_version=self._model_version,
        )

        return AnalysisResult(
            intent_type=reply.intent_type,
            domain_specific_intent=reply.domain_specific_intent,
            keywords=keywords,
            priority=priority,
            confidence=reply.confidence,
            emotional_tone=tone,
            urgency_indicators=tuple(reply.urgency_indicators),
            reasoning=reply.reasoning,
            intent_scores=dict(reply.intent_scores),
            metrics=metrics,
        )


def _to_keyword(keyword: GatewayKeyword) -> Keyword:
    return Keyword(text=keyword.text, weight=keyword.weight, category=keyword.category)
