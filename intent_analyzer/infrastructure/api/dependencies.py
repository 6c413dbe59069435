"""FastAPI dependency injection — wires the model gateway into use cases."""

from __future__ import annotations

from fastapi import Depends, Request

from intent_analyzer.application.ports.model_gateway import ModelGatewayPort
from intent_analyzer.application.use_cases.analyze_intent import AnalyzeIntentUseCase
from intent_analyzer.config import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_model_gateway(request: Request) -> ModelGatewayPort:
    # Built once in the app lifespan (or injected by create_app).
    return request.app.state.model_gateway


def get_analyze_intent_uc(
    gateway: ModelGatewayPort = Depends(get_model_gateway),
    settings: Settings = Depends(get_app_settings),
) -> AnalyzeIntentUseCase:
    return AnalyzeIntentUseCase(gateway=gateway, model_version=settings.gemini_model_name)
