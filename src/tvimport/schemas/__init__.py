"""Pydantic schemas for tvimport configuration files."""

from __future__ import annotations

from .config import (
    ConfigSchema,
    ImportingSchema,
    LoggingSchema,
    MediaInfoSchema,
    validate_config_yaml,
)

__all__ = [
    "ConfigSchema",
    "ImportingSchema",
    "LoggingSchema",
    "MediaInfoSchema",
    "validate_config_yaml",
]
