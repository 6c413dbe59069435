"""Domain enums and their short-code tables — pure Python, no external dependencies."""

from enum import Enum


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"
    CRITICAL = "critical"


class EmotionalTone(str, Enum):
    NEUTRAL = "neutral"
    POSITIVE = "positive"
    NEGATIVE = "negative"
    FRUSTRATED = "frustrated"
    URGENT = "urgent"
    GRATEFUL = "grateful"


# ── Priority <-> short code ─────────────────────────────────────────

DEFAULT_PRIORITY = Priority.MEDIUM

PRIORITY_BY_CODE: dict[str, Priority] = {
    "P0": Priority.CRITICAL,
    "P1": Priority.URGENT,
    "P2": Priority.HIGH,
    "P3": Priority.MEDIUM,
    "P4": Priority.LOW,
}

CODE_BY_PRIORITY: dict[Priority, str] = {
    Priority.CRITICAL: "P0",
    Priority.URGENT: "P1",
    Priority.HIGH: "P2",
    Priority.MEDIUM: "P3",
    Priority.LOW: "P4",
}


def priority_from_code(code: str | None) -> Priority:
    """Map a model short code ("P0".."P4") to Priority; anything else is MEDIUM."""
    return PRIORITY_BY_CODE.get(code or "", DEFAULT_PRIORITY)


def priority_to_code(priority: Priority) -> str:
    return CODE_BY_PRIORITY.get(priority, CODE_BY_PRIORITY[DEFAULT_PRIORITY])


# ── EmotionalTone <-> code ──────────────────────────────────────────

DEFAULT_TONE = EmotionalTone.NEUTRAL

TONE_BY_CODE: dict[str, EmotionalTone] = {
    "neutral": EmotionalTone.NEUTRAL,
    "positive": EmotionalTone.POSITIVE,
    "negative": EmotionalTone.NEGATIVE,
    "frustrated": EmotionalTone.FRUSTRATED,
    "urgent": EmotionalTone.URGENT,
    "grateful": EmotionalTone.GRATEFUL,
}

CODE_BY_TONE: dict[EmotionalTone, str] = {tone: code for code, tone in TONE_BY_CODE.items()}


def tone_from_code(code: str | None) -> EmotionalTone:
    """Map a model tone code to EmotionalTone; anything else is NEUTRAL."""
    return TONE_BY_CODE.get(code or "", DEFAULT_TONE)


def tone_to_code(tone: EmotionalTone) -> str:
    return CODE_BY_TONE.get(tone, CODE_BY_TONE[DEFAULT_TONE])
