"""Prompt construction for intent analysis.

build_prompt is a pure function of the request: the instruction block is
fixed and only the message, the domain and the optional context vary.
"""

from __future__ import annotations

from intent_analyzer.application.ports.model_gateway import GatewayRequest

INTENT_TYPES = (
    "question_how",
    "question_what",
    "request_help",
    "report_issue",
    "ask_status",
    "question_general",
)

PRIORITY_CODES = ("P0", "P1", "P2", "P3", "P4")

TONE_CODES = ("neutral", "positive", "negative", "frustrated", "urgent", "grateful")

PROMPT_TEMPLATE = """\
Analyze the user's message and identify its intent, priority, emotional tone and keywords.

Message to analyze: "{text}"
Domain: {domain}{context}

Respond with exactly this JSON structure:
{{
  "intent_type": "{intent_types}",
  "domain_specific_intent": "specific intent within the domain",
  "keywords": [
    {{"text": "keyword", "weight": 0.9, "category": "technical|action|domain"}}
  ],
  "priority": "{priority_codes}",
  "confidence": 0.85,
  "emotional_tone": "{tone_codes}",
  "urgency_indicators": ["urgent", "asap"],
  "reasoning": "why this analysis was chosen",
  "intent_scores": {{
    "question_how": 0.85,
    "question_what": 0.1,
    "request_help": 0.05
  }}
}}

Guidelines:
- intent_type: the main intent (how-to question, what question, help request, issue report, status inquiry, general question)
- priority: P0 (critical), P1 (urgent), P2 (high), P3 (medium), P4 (low)
- emotional_tone: the user's emotional state
- keywords: important keywords, each with a weight between 0.0 and 1.0
- confidence: confidence of the analysis between 0.0 and 1.0"""


def build_prompt(request: GatewayRequest) -> str:
    context = ""
    if request.context_messages:
        context = "\n\nPrevious conversation context:\n" + "\n".join(request.context_messages)

    return PROMPT_TEMPLATE.format(
        text=request.text,
        domain=request.domain,
        context=context,
        intent_types="|".join(INTENT_TYPES),
        priority_codes="|".join(PRIORITY_CODES),
        tone_codes="|".join(TONE_CODES),
    )
