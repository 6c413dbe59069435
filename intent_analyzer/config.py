"""Application configuration via Pydantic Settings.

NOTE: Env variable names are mapped explicitly (GEMINI_PROJECT_ID,
GEMINI_MODEL_NAME, SERVER_PORT, etc.) to avoid silent misconfiguration.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    # Server
    server_host: str = Field(default="0.0.0.0", validation_alias="SERVER_HOST")
    server_port: int = Field(default=8097, validation_alias="SERVER_PORT")

    # Gemini
    gemini_project_id: str = Field(default="", validation_alias="GEMINI_PROJECT_ID")
    gemini_location: str = Field(default="us-central1", validation_alias="GEMINI_LOCATION")
    gemini_model_name: str = Field(
        default="gemini-1.5-pro-001",
        validation_alias="GEMINI_MODEL_NAME",
    )
    gemini_api_key: str = Field(default="", validation_alias="GEMINI_API_KEY")

    # App
    log_level: str = Field(default="info", validation_alias="LOG_LEVEL")
    log_format: str = Field(default="json", validation_alias="LOG_FORMAT")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    def warn_if_incomplete(self) -> None:
        """Log a warning for each missing Gemini credential."""
        if not self.gemini_project_id.strip():
            logger.warning("GEMINI_PROJECT_ID is not set, Vertex AI backend unavailable")
        if not self.gemini_api_key.strip():
            logger.warning("GEMINI_API_KEY is not set, Gemini Developer API unavailable")


@lru_cache
def get_settings() -> Settings:
    return Settings()
