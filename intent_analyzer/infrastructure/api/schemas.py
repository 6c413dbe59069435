"""HTTP request/response schemas and transport enums."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, model_validator

from intent_analyzer.domain.entities.analysis import AnalysisResult
from intent_analyzer.domain.value_objects.enums import EmotionalTone, Priority


class PriorityOut(str, Enum):
    PRIORITY_LOW = "PRIORITY_LOW"
    PRIORITY_MEDIUM = "PRIORITY_MEDIUM"
    PRIORITY_HIGH = "PRIORITY_HIGH"
    PRIORITY_URGENT = "PRIORITY_URGENT"
    PRIORITY_CRITICAL = "PRIORITY_CRITICAL"


class EmotionalToneOut(str, Enum):
    TONE_NEUTRAL = "TONE_NEUTRAL"
    TONE_POSITIVE = "TONE_POSITIVE"
    TONE_NEGATIVE = "TONE_NEGATIVE"
    TONE_FRUSTRATED = "TONE_FRUSTRATED"
    TONE_URGENT = "TONE_URGENT"
    TONE_GRATEFUL = "TONE_GRATEFUL"


class ServingStatus(str, Enum):
    SERVING = "SERVING"
    NOT_SERVING = "NOT_SERVING"


PRIORITY_OUT: dict[Priority, PriorityOut] = {
    Priority.LOW: PriorityOut.PRIORITY_LOW,
    Priority.MEDIUM: PriorityOut.PRIORITY_MEDIUM,
    Priority.HIGH: PriorityOut.PRIORITY_HIGH,
    Priority.URGENT: PriorityOut.PRIORITY_URGENT,
    Priority.CRITICAL: PriorityOut.PRIORITY_CRITICAL,
}

TONE_OUT: dict[EmotionalTone, EmotionalToneOut] = {
    EmotionalTone.NEUTRAL: EmotionalToneOut.TONE_NEUTRAL,
    EmotionalTone.POSITIVE: EmotionalToneOut.TONE_POSITIVE,
    EmotionalTone.NEGATIVE: EmotionalToneOut.TONE_NEGATIVE,
    EmotionalTone.FRUSTRATED: EmotionalToneOut.TONE_FRUSTRATED,
    EmotionalTone.URGENT: EmotionalToneOut.TONE_URGENT,
    EmotionalTone.GRATEFUL: EmotionalToneOut.TONE_GRATEFUL,
}


def priority_to_transport(priority: Priority) -> PriorityOut:
    return PRIORITY_OUT.get(priority, PriorityOut.PRIORITY_MEDIUM)


def tone_to_transport(tone: EmotionalTone) -> EmotionalToneOut:
    return TONE_OUT.get(tone, EmotionalToneOut.TONE_NEUTRAL)


# ── Request / Response schemas ──────────────────────────────────────

class IntentRequest(BaseModel):
    text: str = ""
    domain: str = ""
    user_id: str = ""
    session_id: str = ""
    context_messages: list[str] = []
    metadata: dict[str, str] = {}

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # null is treated like an omitted field; a null text is then rejected as empty.
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class KeywordOut(BaseModel):
    text: str
    weight: float
    category: str


class ProcessingMetricsOut(BaseModel):
    processing_time_ms: int
    gemini_api_time_ms: int
    cache_hit_count: int
    model_version: str
    cache_hit: bool


class IntentResponse(BaseModel):
    intent_type: str
    domain_specific_intent: str
    keywords: list[KeywordOut]
    confidence: float
    priority: PriorityOut
    emotional_tone: EmotionalToneOut
    urgency_indicators: list[str]
    intent_scores: dict[str, float]
    reasoning: str
    metrics: ProcessingMetricsOut

    @classmethod
    def from_result(cls, result: AnalysisResult) -> IntentResponse:
        m = result.metrics
        return cls(
            intent_type=result.intent_type,
            domain_specific_intent=result.domain_specific_intent,
            keywords=[
                KeywordOut(text=k.text, weight=k.weight, category=k.category)
                for k in result.keywords
            ],
            confidence=result.confidence,
            priority=priority_to_transport(result.priority),
            emotional_tone=tone_to_transport(result.emotional_tone),
            urgency_indicators=list(result.urgency_indicators),
            intent_scores=dict(result.intent_scores),
            reasoning=result.reasoning,
            metrics=ProcessingMetricsOut(
                processing_time_ms=m.processing_time_ms,
                gemini_api_time_ms=m.model_call_time_ms,
                cache_hit_count=m.cache_hit_count,
                model_version=m.model_version,
                cache_hit=m.cache_hit,
            ),
        )


class HealthCheckResponse(BaseModel):
    status: ServingStatus
    message: str
    details: dict[str, str]
