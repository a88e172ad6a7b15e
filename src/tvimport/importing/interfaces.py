"""Contracts for the collaborators the decision pipeline consumes.

``LocalDiskProvider`` and ``VideoFileInfoReader`` in ``tvimport.media``
satisfy DiskProvider and MediaInfoReader; the catalog and sample detection
are supplied by the host application.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tvimport.media.mediainfo import MediaInfoModel
    from tvimport.tv.models import Series


class DetectSampleResult(Enum):
    """Outcome of sample detection."""

    SAMPLE = "sample"
    NOT_SAMPLE = "not_sample"
    INDETERMINATE = "indeterminate"


class DiskProvider(Protocol):
    def get_file_size(self, path: Path | str) -> int:
        """Size in bytes; raises FileMissingError if the path is gone."""
        ...

    def file_exists(self, path: Path | str) -> bool: ...

    def get_available_space(self, path: Path | str) -> int | None: ...


class MediaInfoReader(Protocol):
    def get_media_info(self, path: Path | str) -> MediaInfoModel | None:
        """None when the file is not readable as a media container; never raises for non-video."""
        ...


class MediaFileService(Protocol):
    def filter_existing_files(self, paths: Sequence[str], series: Series) -> list[str]:
        """Paths not already imported for the series. Pure query."""
        ...


class SampleDetector(Protocol):
    def is_sample(
        self,
        series: Series,
        path: Path | str,
        is_special: bool,
    ) -> DetectSampleResult:
        """Classify a file; must be deterministic for identical inputs."""
        ...
