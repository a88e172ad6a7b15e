"""Environment-based settings using pydantic-settings.

Environment variables override values loaded from config.yaml.

Usage:
    from tvimport.env_settings import get_env_settings

    env = get_env_settings()
    print(env.log_level)  # From TVIMPORT_LOG_LEVEL env var

Environment Variables:
    TVIMPORT_LOG_LEVEL - Logging level (unset = use config.yaml)
    TVIMPORT_CONFIG_FILE - Path to config.yaml (default: ./config.yaml)
    TVIMPORT_MEDIAINFO_BINARY - mediainfo executable (unset = use config.yaml)
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
    """tvimport settings from environment variables.

    Reads from TVIMPORT_* env vars. Unset values stay None so the
    config.yaml value wins.
    """

    model_config = SettingsConfigDict(
        env_prefix="TVIMPORT_",
        extra="ignore",
    )

    log_level: str | None = Field(default=None, description="Logging level override")
    config_file: Path = Field(default=Path("config.yaml"), description="Path to config.yaml")
    mediainfo_binary: str | None = Field(default=None, description="mediainfo executable override")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str | None:
        """Validate and normalize log level."""
        if v is None:
            return None
        upper = v.upper()
        if upper not in VALID_LOG_LEVELS:
            raise ValueError(f"TVIMPORT_LOG_LEVEL must be one of {VALID_LOG_LEVELS}, got: {v}")
        return upper


@lru_cache(maxsize=1)
def get_env_settings() -> EnvSettings:
    """Get cached environment settings.

    The cache is populated on first call; use clear_env_settings_cache()
    to pick up changed environment variables.
    """
    return EnvSettings()


def clear_env_settings_cache() -> None:
    """Clear the cached environment settings."""
    get_env_settings.cache_clear()
