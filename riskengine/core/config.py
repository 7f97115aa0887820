"""Engine-wide configuration: identity, logging and metrics switches."""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Process-level settings for the risk engine.

    Rule thresholds live with their components (CREDIT_, PRICING_, RISK_
    prefixes); this class only covers the ambient concerns. Override with
    RISKENGINE_* environment variables or a .env file:
        RISKENGINE_LOG_FORMAT=console
        RISKENGINE_METRICS_ENABLED=false
    """

    model_config = SettingsConfigDict(
        env_prefix="RISKENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "riskengine"
    app_version: str = "0.1.0"

    # Metrics
    metrics_enabled: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
