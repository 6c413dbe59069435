"""Intent analysis endpoint."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException

from intent_analyzer.application.errors import IntentAnalysisError
from intent_analyzer.application.use_cases.analyze_intent import AnalyzeIntentUseCase
from intent_analyzer.domain.entities.analysis import AnalysisRequest
from intent_analyzer.infrastructure.api.dependencies import get_analyze_intent_uc
from intent_analyzer.infrastructure.api.schemas import IntentRequest, IntentResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/intent", tags=["intent"])


@router.post("/analyze", response_model=IntentResponse)
async def analyze_intent(
    body: IntentRequest,
    use_case: AnalyzeIntentUseCase = Depends(get_analyze_intent_uc),
):
    """Analyze a single user message."""
    logger.info(
        "Received intent analysis request",
        extra={"method": "AnalyzeIntent", "text": body.text, "domain": body.domain},
    )

    if not body.text:
        raise HTTPException(status_code=400, detail="text field is required")

    request = AnalysisRequest(
        text=body.text,
        domain=body.domain,
        user_id=body.user_id,
        session_id=body.session_id,
        context_messages=tuple(body.context_messages),
        metadata=dict(body.metadata),
        received_at=datetime.now(timezone.utc),
    )

    try:
        result = await use_case.execute(request)
    except IntentAnalysisError:
        # Provider detail stays in the logs, never in the response.
        logger.exception("Intent analysis failed")
        raise HTTPException(status_code=500, detail="intent analysis failed")

    response = IntentResponse.from_result(result)

    logger.info(
        "Intent analysis completed successfully",
        extra={
            "intent": response.intent_type,
            "confidence": response.confidence,
            "priority": response.priority.value,
        },
    )
    return response
