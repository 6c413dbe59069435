"""Health check endpoint."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from intent_analyzer.application.use_cases.analyze_intent import AnalyzeIntentUseCase
from intent_analyzer.infrastructure.api.dependencies import get_analyze_intent_uc
from intent_analyzer.infrastructure.api.schemas import HealthCheckResponse, ServingStatus

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

SERVICE_NAME = "intent-analyzer"
SERVICE_VERSION = "1.0.0"


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(use_case: AnalyzeIntentUseCase = Depends(get_analyze_intent_uc)):
    """Check model connectivity. Each call makes one real model request."""
    logger.info("Health check requested")

    healthy = await use_case.is_healthy()
    if healthy:
        status, message = ServingStatus.SERVING, "Service is healthy"
    else:
        status, message = ServingStatus.NOT_SERVING, "Service is unhealthy"

    logger.info("Health check completed", extra={"status": status.value, "healthy": healthy})

    return HealthCheckResponse(
        status=status,
        message=message,
        details={
            "timestamp": datetime.now(timezone.utc).isoformat(timespec="seconds"),
            "service": SERVICE_NAME,
            "version": SERVICE_VERSION,
        },
    )
