"""Intent analysis request/result — immutable per-call domain entities.

Mapping fields are wrapped in read-only MappingProxyType views on
construction. The views are not hashable, so neither are the entities that
hold them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType

from intent_analyzer.domain.value_objects.enums import EmotionalTone, Priority


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _freeze(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class AnalysisRequest:
    text: str
    domain: str = ""
    user_id: str = ""
    session_id: str = ""
    context_messages: tuple[str, ...] = ()
    metadata: Mapping[str, str] = field(default_factory=dict)
    received_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self):
        object.__setattr__(self, "context_messages", tuple(self.context_messages))
        object.__setattr__(self, "metadata", _freeze(self.metadata))


@dataclass(frozen=True)
class Keyword:
    text: str
    weight: float
    category: str


@dataclass(frozen=True)
class ProcessingMetrics:
    """Timing for one analysis.

    cache_hit / cache_hit_count are kept for interface stability; there is
    no cache, so they are always False / 0.
    """

    processing_time_ms: int
    model_call_time_ms: int
    model_version: str
    cache_hit_count: int = 0
    cache_hit: bool = False


@dataclass(frozen=True)
class AnalysisResult:
    intent_type: str
    domain_specific_intent: str
    keywords: tuple[Keyword, ...]
    priority: Priority
    confidence: float
    emotional_tone: EmotionalTone
    urgency_indicators: tuple[str, ...]
    reasoning: str
    intent_scores: Mapping[str, float]
    metrics: ProcessingMetrics

    def __post_init__(self):
        object.__setattr__(self, "intent_scores", _freeze(self.intent_scores))
