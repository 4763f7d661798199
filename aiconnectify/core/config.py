# aiconnectify/core/config.py
from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


class Settings(BaseSettings):
    """
    Library settings, loaded from environment variables and/or .env file.
    """

    # Environment settings
    APP_NAME: str = "AI Connectify"
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # HTTP transport
    HTTP_TIMEOUT_SECONDS: float = 10.0
    USER_AGENT: str = "aiconnectify/0.1"

    # Provider API keys, used when a connector is created without one
    OPENAI_API_KEY: Optional[str] = Field(default=None, repr=False)
    ANTHROPIC_API_KEY: Optional[str] = Field(default=None, repr=False)
    COHERE_API_KEY: Optional[str] = Field(default=None, repr=False)
    MISTRAL_API_KEY: Optional[str] = Field(default=None, repr=False)
    STABILITY_API_KEY: Optional[str] = Field(default=None, repr=False)

    # Provider endpoints
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    ANTHROPIC_BASE_URL: str = "https://api.anthropic.com/v1"
    COHERE_BASE_URL: str = "https://api.cohere.com"
    MISTRAL_BASE_URL: str = "https://api.mistral.ai/v1"
    STABILITY_BASE_URL: str = "https://api.stability.ai/v2beta"

    # Anthropic protocol headers
    ANTHROPIC_VERSION: str = "2023-06-01"
    ANTHROPIC_BETA_MESSAGE_BATCHES: str = "message-batches-2024-09-24"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        """Accept any casing but only the standard logging level names."""
        level = str(value).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator(
        "OPENAI_BASE_URL",
        "ANTHROPIC_BASE_URL",
        "COHERE_BASE_URL",
        "MISTRAL_BASE_URL",
        "STABILITY_BASE_URL",
    )
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("HTTP_TIMEOUT_SECONDS")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("HTTP_TIMEOUT_SECONDS must be greater than zero")
        return value

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


settings = Settings()
