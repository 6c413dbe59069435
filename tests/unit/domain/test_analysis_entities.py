"""Tests for analysis domain entities."""

import dataclasses
from datetime import timezone

import pytest

from intent_analyzer.domain.entities.analysis import (
    AnalysisRequest,
    AnalysisResult,
    Keyword,
    ProcessingMetrics,
)
from intent_analyzer.domain.value_objects.enums import EmotionalTone, Priority


def test_request_defaults():
    req = AnalysisRequest(text="hello")
    assert req.domain == ""
    assert req.user_id == ""
    assert req.session_id == ""
    assert req.context_messages == ()
    assert req.metadata == {}
    assert req.received_at.tzinfo == timezone.utc


def test_request_is_immutable():
    req = AnalysisRequest(text="hello")
    with pytest.raises(dataclasses.FrozenInstanceError):
        req.text = "changed"


def test_metrics_cache_fields_default_off():
    metrics = ProcessingMetrics(processing_time_ms=10, model_call_time_ms=5, model_version="m")
    assert metrics.cache_hit is False
    assert metrics.cache_hit_count == 0


def test_result_is_immutable():
    result = AnalysisResult(
        intent_type="question_how",
        domain_specific_intent="",
        keywords=(Keyword(text="deploy", weight=0.7, category="action"),),
        priority=Priority.LOW,
        confidence=0.5,
        emotional_tone=EmotionalTone.NEUTRAL,
        urgency_indicators=(),
        reasoning="",
        intent_scores={},
        metrics=ProcessingMetrics(processing_time_ms=1, model_call_time_ms=1, model_version="m"),
    )
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.priority = Priority.CRITICAL


def test_request_metadata_is_read_only():
    source = {"channel": "web"}
    req = AnalysisRequest(text="hello", metadata=source)

    source["channel"] = "changed"
    assert req.metadata == {"channel": "web"}
    with pytest.raises(TypeError):
        req.metadata["channel"] = "slack"


def test_request_context_is_tuple():
    req = AnalysisRequest(text="hello", context_messages=["a", "b"])
    assert req.context_messages == ("a", "b")


def test_result_intent_scores_are_read_only():
    result = AnalysisResult(
        intent_type="question_how",
        domain_specific_intent="",
        keywords=(),
        priority=Priority.LOW,
        confidence=0.5,
        emotional_tone=EmotionalTone.NEUTRAL,
        urgency_indicators=(),
        reasoning="",
        intent_scores={"question_how": 0.9},
        metrics=ProcessingMetrics(processing_time_ms=1, model_call_time_ms=1, model_version="m"),
    )
    with pytest.raises(TypeError):
        result.intent_scores["question_how"] = 0.1
    assert dict(result.intent_scores) == {"question_how": 0.9}
