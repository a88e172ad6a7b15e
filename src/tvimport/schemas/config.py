"""
Pydantic schema for config.yaml validation.

This validates the YAML structure at load time before converting to dataclasses.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class LoggingSchema(BaseModel):
    """Logging settings."""

    level: str = "INFO"
    file: str | None = None

    model_config = {"extra": "forbid"}

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level is a recognized value."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid level '{v}'. Must be one of: {valid_levels}")
        return v.upper()


class MediaInfoSchema(BaseModel):
    """MediaInfo settings."""

    binary: str = "mediainfo"
    timeout: int = Field(default=60, ge=1, le=600)
    max_retries: int = Field(default=2, ge=0, le=10)

    model_config = {"extra": "forbid"}


class ImportingSchema(BaseModel):
    """Import decision settings."""

    minimum_free_space_mb: int = Field(default=100, ge=0)
    skip_free_space_check: bool = False
    extra_media_extensions: list[str] = Field(default_factory=list)

    model_config = {"extra": "forbid"}

    @field_validator("extra_media_extensions")
    @classmethod
    def validate_extensions(cls, v: list[str]) -> list[str]:
        """Ensure extensions start with a dot."""
        for ext in v:
            if not ext.startswith("."):
                raise ValueError(f"Extension '{ext}' must start with a dot")
        return [ext.lower() for ext in v]


class ConfigSchema(BaseModel):
    """
    Complete config.yaml schema.

    Validates structure and types. Environment variable merging happens
    in config.py after validation.
    """

    logging: LoggingSchema = Field(default_factory=LoggingSchema)
    mediainfo: MediaInfoSchema = Field(default_factory=MediaInfoSchema)
    importing: ImportingSchema = Field(default_factory=ImportingSchema)

    model_config = {"extra": "forbid"}  # Catch typos in config keys


def validate_config_yaml(data: dict[str, Any]) -> ConfigSchema:
    """
    Validate config.yaml data against schema.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return ConfigSchema.model_validate(data)
