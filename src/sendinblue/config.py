"""
Client configuration with environment-driven settings.
"""

import logging
import os
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_URL = "https://api.sendinblue.com/v3"


class SendinblueSettings(BaseSettings):
    """Sendinblue settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SENDINBLUE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = Field(default="", description="API v3 key sent in the api-key header")
    server_url: str = Field(default=BASE_URL, description="Base URL of the API")
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="HTTP request timeout in seconds.",
    )
    log_level: str = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize to an upper-case standard level name."""
        level = str(v).strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache(maxsize=1)
def _get_settings_cached() -> SendinblueSettings:
    return SendinblueSettings()


def get_settings() -> SendinblueSettings:
    # Tests monkeypatch the environment, a cached instance would go stale.
    if os.environ.get("PYTEST_CURRENT_TEST"):
        return SendinblueSettings()
    return _get_settings_cached()
