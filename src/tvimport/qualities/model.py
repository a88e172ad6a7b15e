"""QualityModel: a quality tier plus revision, with detection provenance."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from .quality import Quality, QualitySource, quality_source_for
from .revision import Revision


class QualityDetectionSource(Enum):
    """Where a quality value was read from."""

    UNKNOWN = "unknown"
    NAME = "name"  # Release/file name tokens
    EXTENSION = "extension"  # File extension only (least trustworthy)
    MEDIA_INFO = "media_info"  # Container metadata (resolution)


@dataclass(frozen=True)
class QualityModel:
    """Quality tier and revision of a release.

    Equality and hashing only consider ``quality`` and ``revision``;
    ``detection_source`` is provenance and never makes two models differ.
    """

    quality: Quality = Quality.UNKNOWN
    revision: Revision = field(default_factory=Revision)
    detection_source: QualityDetectionSource = field(
        default=QualityDetectionSource.UNKNOWN, compare=False
    )

    @property
    def quality_source(self) -> QualitySource:
        return quality_source_for(self.quality)

    def with_quality(
        self,
        quality: Quality,
        detection_source: QualityDetectionSource | None = None,
    ) -> QualityModel:
        """Return a copy with a different tier, keeping the revision."""
        return replace(
            self,
            quality=quality,
            detection_source=detection_source or self.detection_source,
        )

    def __str__(self) -> str:
        return f"{self.quality} {self.revision}"
