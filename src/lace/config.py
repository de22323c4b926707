"""Environment-based configuration using pydantic-settings.

Example:
    >>> from lace.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.format in ("console", "json", "none")
    True

    # Or with environment variables:
    # LACE_STRICT_SHAPES=false
    # LACE_LOG_LEVEL=DEBUG
    # LACE_LOG_FORMAT=json
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["console", "json", "none"]


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LACE_LOG_",
        extra="ignore",
    )

    level: LogLevel = "WARNING"
    format: LogFormat = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class LaceSettings(BaseSettings):
    """Root settings for lace.

    Loads configuration from environment variables with the LACE_ prefix.

    Example environment variables:
        LACE_STRICT_SHAPES=false
        LACE_LOG_LEVEL=DEBUG
        LACE_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="LACE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    strict_shapes: bool = Field(
        default=True,
        description="Reject tagged tuples outside the supported payload arity instead of wrapping them as Ok",
    )
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> LaceSettings:
    """Get the global settings instance (cached).

    Raises pydantic.ValidationError when the environment holds invalid values.

    Example:
        >>> get_settings() is get_settings()
        True
    """
    return LaceSettings()


@lru_cache(maxsize=1)
def effective_settings() -> LaceSettings:
    """Settings for library internals: get_settings(), or defaults if the environment is invalid.

    Example:
        >>> effective_settings().strict_shapes in (True, False)
        True
    """
    try:
        return get_settings()
    except ValidationError:
        return LaceSettings.model_construct(
            strict_shapes=True,
            logging=LoggingSettings.model_construct(level="WARNING", format="console"),
        )


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
    effective_settings.cache_clear()
