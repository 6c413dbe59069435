"""Recover a structured GatewayReply from a free-form model response.

The JSON span is located with a brace scan: first '{' to last '}'. This is a
heuristic, not a parser. Literal braces in prose around the payload (or after
it) will widen the span and make the parse fail.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from intent_analyzer.application.errors import (
    EmptyReplyError,
    PayloadNotFoundError,
    PayloadParseError,
)
from intent_analyzer.application.ports.model_gateway import GatewayReply


def extract_reply_text(response: Any) -> str:
    """Return the text of the first non-empty part of the first candidate.

    Works on anything shaped like a google.genai GenerateContentResponse.
    """
    candidates = getattr(response, "candidates", None) if response is not None else None
    if not candidates:
        raise EmptyReplyError(EmptyReplyError.NO_CANDIDATES)

    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) if content is not None else None
    if not parts:
        raise EmptyReplyError(EmptyReplyError.NO_CONTENT_PARTS)

    for part in parts:
        text = getattr(part, "text", None)
        if text:
            return text

    raise EmptyReplyError(EmptyReplyError.EMPTY_TEXT)


def extract_json_payload(text: str) -> str:
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        raise PayloadNotFoundError("no valid JSON found in response")
    return text[start : end + 1]


def parse_reply(payload: str) -> GatewayReply:
    try:
        return GatewayReply.model_validate_json(payload)
    except ValidationError as e:
        raise PayloadParseError(f"failed to parse JSON response: {e}", payload) from e
