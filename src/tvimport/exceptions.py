"""
tvimport exception hierarchy.

Exception Hierarchy:
    TvImportError (base)
    ├── ConfigurationError - Config file issues, invalid settings
    ├── ImportPipelineError - Per-file import pipeline failures
    │   └── AugmentingFailedError - No episode identity could be parsed
    ├── DiskError - Filesystem queries
    │   └── FileMissingError - File vanished or never existed
    └── ExternalToolError - Subprocess failures
        └── MediaInfoError - mediainfo execution/output failures
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class TvImportError(Exception):
    """Base exception for all tvimport errors."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """
        Initialize tvimport exception.

        Args:
            message: Human-readable error message
            details: Optional structured error details for logging/debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(TvImportError):
    """Configuration file or settings error."""

    def __init__(
        self,
        message: str,
        *,
        config_file: Path | str | None = None,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if config_file:
            details["config_file"] = str(config_file)
        if field:
            details["field"] = field
        super().__init__(message, details=details)
        self.config_file = config_file
        self.field = field


# =============================================================================
# Import Pipeline Errors
# =============================================================================


class ImportPipelineError(TvImportError):
    """Failure while deciding on a single file."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | str | None = None,
        stage: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if path:
            details["path"] = str(path)
        if stage:
            details["stage"] = stage
        super().__init__(message, details=details)
        self.path = path
        self.stage = stage


class AugmentingFailedError(ImportPipelineError):
    """No usable episode info could be derived for a media file."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("stage", "augmenting")
        super().__init__(message, **kwargs)


# =============================================================================
# Disk Errors
# =============================================================================


class DiskError(TvImportError):
    """Filesystem query failure."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if path:
            details["path"] = str(path)
        super().__init__(message, details=details)
        self.path = path


class FileMissingError(DiskError):
    """File does not exist (or vanished mid-batch)."""

    pass


# =============================================================================
# External Tool Errors
# =============================================================================


class ExternalToolError(TvImportError):
    """External tool/subprocess failure."""

    def __init__(
        self,
        message: str,
        *,
        tool: str | None = None,
        command: str | None = None,
        return_code: int | None = None,
        stderr: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if tool:
            details["tool"] = tool
        if command:
            details["command"] = command
        if return_code is not None:
            details["return_code"] = return_code
        if stderr:
            details["stderr"] = stderr
        super().__init__(message, details=details)
        self.tool = tool
        self.command = command
        self.return_code = return_code
        self.stderr = stderr


class MediaInfoError(ExternalToolError):
    """mediainfo CLI failure or unreadable output."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("tool", "mediainfo")
        super().__init__(message, **kwargs)
