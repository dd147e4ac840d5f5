"""
Configuration — typed, validated settings for the demo entry point.

Uses pydantic-settings to load from environment variables prefixed with
DIVISION_DEMO_ (falling back to a .env file, then defaults):

    DIVISION_DEMO_LOG_LEVEL=DEBUG
    DIVISION_DEMO_JSON_LOGS=true
    DIVISION_DEMO_DIVISORS='[5, 0, -3]'

Only main() reads settings. The typed_result core never touches the
environment.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve the .env file relative to the project root (two levels above this file).
_ENV_FILE = Path(__file__).parent.parent.parent / ".env"


class DemoSettings(BaseSettings):
    """
    Demo settings.

    Load order (highest priority first):
      1. Environment variables
      2. .env file
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="DIVISION_DEMO_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Logging level name")
    json_logs: bool = Field(default=False, description="Render logs as JSON lines")
    dividend: int = Field(default=10, description="Dividend used by every demo division")
    divisors: list[int] = Field(
        default_factory=lambda: [5, 0],
        description="Divisors tried in turn against the dividend",
    )
    worker_threads: int = Field(
        default=2, ge=1, description="Thread pool size for background completions"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Reject names the logging module does not know."""
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level
