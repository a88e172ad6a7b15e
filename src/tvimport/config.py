"""
Configuration loading from config.yaml and environment variables.

Priority (highest first):

1. **Environment** (``TVIMPORT_*`` variables, see env_settings.py)
2. **config.yaml** (validated by schemas/config.py)
3. **Built-in defaults**

A missing config.yaml is not an error; every setting has a default.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from tvimport.env_settings import get_env_settings
from tvimport.exceptions import ConfigurationError
from tvimport.schemas.config import validate_config_yaml

logger = logging.getLogger(__name__)

BYTES_PER_MB = 1024 * 1024


@dataclass
class LoggingConfig:
    """Logging settings (from config.yaml logging section)."""

    level: str = "INFO"
    file: Path | None = None


@dataclass
class MediaInfoConfig:
    """MediaInfo settings (from config.yaml mediainfo section)."""

    binary: str = "mediainfo"
    timeout: int = 60
    max_retries: int = 2


@dataclass
class ImportingConfig:
    """Import decision settings (from config.yaml importing section)."""

    minimum_free_space_mb: int = 100
    skip_free_space_check: bool = False
    extra_media_extensions: list[str] = field(default_factory=list)

    @property
    def minimum_free_space_bytes(self) -> int:
        return self.minimum_free_space_mb * BYTES_PER_MB


@dataclass
class Settings:
    """Complete tvimport settings."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    mediainfo: MediaInfoConfig = field(default_factory=MediaInfoConfig)
    importing: ImportingConfig = field(default_factory=ImportingConfig)
    config_file: Path | None = None


def load_yaml_config(config_path: Path) -> dict[str, Any]:
    """Load configuration from YAML file.

    Raises:
        ConfigurationError: If the file is not valid YAML or not a mapping
    """
    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}", config_file=config_path) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file must contain a mapping, got {type(data).__name__}",
            config_file=config_path,
        )
    return data


def load_settings(config_file: Path | None = None) -> Settings:
    """
    Load settings from config.yaml and environment variables.

    Args:
        config_file: Path to config.yaml (default: TVIMPORT_CONFIG_FILE or ./config.yaml)

    Returns:
        Populated Settings object

    Raises:
        ConfigurationError: If the config file is invalid
    """
    env = get_env_settings()
    config_path = config_file or env.config_file

    if config_path.exists():
        data = load_yaml_config(config_path)
        loaded_from: Path | None = config_path
    else:
        logger.debug("No config file at %s, using defaults", config_path)
        data = {}
        loaded_from = None

    try:
        schema = validate_config_yaml(data)
    except ValidationError as e:
        errors = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        raise ConfigurationError(
            f"Invalid config in {config_path}: {'; '.join(errors)}",
            config_file=config_path,
            details={"errors": errors},
        ) from e

    settings = Settings(
        logging=LoggingConfig(
            level=env.log_level or schema.logging.level,
            file=Path(schema.logging.file) if schema.logging.file else None,
        ),
        mediainfo=MediaInfoConfig(
            binary=env.mediainfo_binary or schema.mediainfo.binary,
            timeout=schema.mediainfo.timeout,
            max_retries=schema.mediainfo.max_retries,
        ),
        importing=ImportingConfig(
            minimum_free_space_mb=schema.importing.minimum_free_space_mb,
            skip_free_space_check=schema.importing.skip_free_space_check,
            extra_media_extensions=list(schema.importing.extra_media_extensions),
        ),
        config_file=loaded_from,
    )
    return settings


# Cached settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reload_settings(config_file: Path | None = None) -> Settings:
    """Force reload of settings (e.g., after config changes)."""
    global _settings
    _settings = load_settings(config_file)
    return _settings


def clear_settings() -> None:
    """Clear cached settings."""
    global _settings
    _settings = None
