"""Typed configuration loaded from the environment via pydantic-settings.

Every field can be set through a ``NUMROOT_``-prefixed environment variable
or a ``.env`` file in the working directory.
"""

from __future__ import annotations

from typing import Literal

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration values are invalid."""


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="NUMROOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_format: Literal["json", "text"] = "text"

    # === Power cache ===
    # the recency counter is shrunk once it reaches this value
    pow_cache_counter_limit: int = 2**31 - 1

    @field_validator("pow_cache_counter_limit")
    @classmethod
    def validate_counter_limit(cls, v: int) -> int:
        if v < 2:
            raise ValueError("pow_cache_counter_limit must be >= 2")
        return v


def load_settings(**overrides: object) -> Settings:
    """Load settings from the environment with optional overrides.

    Raises:
        ConfigurationError: If any value fails validation.
    """
    try:
        return Settings(**overrides)  # type: ignore[arg-type]
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e
