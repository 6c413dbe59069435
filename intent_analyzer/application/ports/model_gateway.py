"""Port interface for the external intent model."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


@dataclass(frozen=True)
class GatewayRequest:
    text: str
    domain: str = ""
    user_id: str = ""
    context_messages: tuple[str, ...] = ()
    metadata: dict[str, str] = field(default_factory=dict)


class _ReplyModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # JSON null means "not given": fall back to the field default.
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class GatewayKeyword(_ReplyModel):
    text: str = ""
    weight: float = 0.0
    category: str = ""


class GatewayReply(_ReplyModel):
    """Structured reply as the model is asked to produce it.

    priority and emotional_tone stay open strings here; they are only
    narrowed to enums by the use case.
    """

    intent_type: str = ""
    domain_specific_intent: str = ""
    keywords: list[GatewayKeyword] = []
    priority: str = ""
    confidence: float = 0.0
    emotional_tone: str = ""
    urgency_indicators: list[str] = []
    reasoning: str = ""
    intent_scores: dict[str, float] = {}
    # Measured by the gateway, never read from the model.
    processing_time_ms: int = 0

    # Nulls inside lists and maps become zero values too.
    @field_validator("keywords", mode="before")
    @classmethod
    def _null_keywords(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [{} if k is None else k for k in value]
        return value

    @field_validator("urgency_indicators", mode="before")
    @classmethod
    def _null_indicators(cls, value: Any) -> Any:
        if isinstance(value, list):
            return ["" if v is None else v for v in value]
        return value

    @field_validator("intent_scores", mode="before")
    @classmethod
    def _null_scores(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {k: 0.0 if v is None else v for k, v in value.items()}
        return value


class ModelGatewayPort(ABC):
    @abstractmethod
    async def analyze(self, request: GatewayRequest) -> GatewayReply:
        """Run one model analysis.

        Raises an IntentAnalysisError subclass on any failure; there is no
        partial result.
        """
        ...

    @abstractmethod
    async def is_healthy(self) -> bool:
        ...
