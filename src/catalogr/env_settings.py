"""Environment-based settings using pydantic-settings.

Usage:
    from catalogr.env_settings import get_env_settings

    env = get_env_settings()
    print(env.log_level)  # From CATALOGR_LOG_LEVEL env var

Environment Variables:
    CATALOGR_LOG_LEVEL - Logging level (default: "INFO")
    CATALOGR_RULES_FILE - YAML/JSON file overriding the built-in title rules
    CATALOGR_STRICT_PATHS - Reject locations outside the import root (default: false)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class EnvSettings(BaseSettings):
    """Application settings from CATALOGR_* environment variables.

    Use get_env_settings() to get a cached instance.
    """

    model_config = SettingsConfigDict(
        env_prefix="CATALOGR_",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Logging level")
    rules_file: Path | None = Field(default=None, description="Title rules override file")
    strict_paths: bool = Field(
        default=False,
        description="Reject media locations that are not under the import root",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        upper = v.upper()
        if upper not in VALID_LOG_LEVELS:
            raise ValueError(f"CATALOGR_LOG_LEVEL must be one of {VALID_LOG_LEVELS}, got: {v}")
        return upper

    @field_validator("rules_file", mode="before")
    @classmethod
    def empty_rules_file_is_none(cls, v: str | Path | None) -> str | Path | None:
        """Treat an empty CATALOGR_RULES_FILE as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


@lru_cache(maxsize=1)
def get_env_settings() -> EnvSettings:
    """Get cached environment settings.

    Call clear_env_settings_cache() after changing the environment.
    """
    settings = EnvSettings()
    logger.debug(
        "Loaded env settings: log_level=%s rules_file=%s strict_paths=%s",
        settings.log_level,
        settings.rules_file,
        settings.strict_paths,
    )
    return settings


def clear_env_settings_cache() -> None:
    """Clear the cached environment settings."""
    get_env_settings.cache_clear()
