"""
Application configuration using pydantic-settings.
All environment variables are validated and typed.
"""

import logging
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from buildwatch.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Watcher settings loaded from BUILDWATCH_* environment variables."""

    # Watched application and release channel; Steam app ids are 32-bit
    app_id: int = Field(default=420, gt=0, le=2**31 - 1)
    branch: str = "public"

    # Seconds between checks
    poll_interval: float = Field(default=30.0, gt=0)

    # HTTP
    api_base_url: str = "https://api.steamcmd.net/v1"
    request_timeout: float = Field(default=10.0, gt=0)

    # Stop on the first fetch error instead of retrying next cycle
    fail_fast: bool = False

    # 0 means run until stopped
    max_cycles: int = Field(default=0, ge=0)

    log_level: str = "INFO"

    @field_validator("branch", mode="before")
    @classmethod
    def _normalize_branch(cls, value: Any) -> str:
        cleaned = str(value).strip()
        if not cleaned:
            raise ValueError("branch must not be empty")
        return cleaned

    @field_validator("api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    model_config = {
        "env_prefix": "BUILDWATCH_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


def load_settings(**overrides: Any) -> Settings:
    """
    Build Settings from the environment, applying explicit overrides.

    Overrides with a value of None are ignored so that unset CLI options
    fall back to the environment and defaults.

    Raises:
        ConfigurationError: If any value fails validation
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return Settings(**values)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {problems}") from exc
