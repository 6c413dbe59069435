"""Intent Analyzer — FastAPI application factory."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request

from intent_analyzer.adapters.llm.gemini_adapter import GeminiGateway
from intent_analyzer.application.ports.model_gateway import ModelGatewayPort
from intent_analyzer.config import Settings, get_settings
from intent_analyzer.infrastructure.api.routes_health import SERVICE_VERSION
from intent_analyzer.infrastructure.api.routes_health import router as health_router
from intent_analyzer.infrastructure.api.routes_intent import router as intent_router
from intent_analyzer.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: build the model gateway unless one was injected."""
    settings: Settings = app.state.settings
    if app.state.model_gateway is None:
        app.state.model_gateway = GeminiGateway.from_settings(settings)
    logger.info(
        "Intent analyzer ready",
        extra={
            "port": settings.server_port,
            "log_level": settings.log_level,
            "model_name": settings.gemini_model_name,
        },
    )
    yield
    logger.info("Intent analyzer stopped")


async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    fields = {"method": request.method, "path": request.url.path}
    logger.info("Request started", extra=fields)

    try:
        response = await call_next(request)
    except Exception:
        fields["duration_ms"] = int((time.perf_counter() - started) * 1000)
        logger.exception("Request failed", extra=fields)
        raise

    fields["status"] = response.status_code
    fields["duration_ms"] = int((time.perf_counter() - started) * 1000)
    if response.status_code >= 400:
        logger.error("Request failed", extra=fields)
    else:
        logger.info("Request completed", extra=fields)
    return response


def create_app(
    settings: Settings | None = None,
    gateway: ModelGatewayPort | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    settings.warn_if_incomplete()

    app = FastAPI(
        title="Intent Analyzer",
        description="Intent, priority and emotional tone analysis backed by Gemini",
        version=SERVICE_VERSION,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.model_gateway = gateway

    app.middleware("http")(log_requests)

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(intent_router, prefix="/api")

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)
    uvicorn.run(
        create_app(settings),
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    run()
