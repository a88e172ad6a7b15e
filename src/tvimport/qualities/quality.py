"""Quality tiers and the release source each tier belongs to."""

from __future__ import annotations

from enum import Enum


class QualitySource(Enum):
    """Release source a quality tier was produced from."""

    UNKNOWN = "unknown"
    TELEVISION = "television"
    WEB = "web"
    DVD = "dvd"
    BLURAY = "bluray"


class Quality(Enum):
    """Coarse resolution + source class.

    Member values are ``(id, label)``. Ids are stable and are
    what gets persisted; labels are for humans.
    """

    UNKNOWN = (0, "Unknown")
    SDTV = (1, "SDTV")
    DVD = (2, "DVD")
    WEBDL_1080P = (3, "WEBDL-1080p")
    HDTV_720P = (4, "HDTV-720p")
    WEBDL_720P = (5, "WEBDL-720p")
    BLURAY_720P = (6, "Bluray-720p")
    BLURAY_1080P = (7, "Bluray-1080p")
    WEBDL_480P = (8, "WEBDL-480p")
    HDTV_1080P = (9, "HDTV-1080p")
    RAWHD = (10, "Raw-HD")
    HDTV_2160P = (16, "HDTV-2160p")
    WEBDL_2160P = (18, "WEBDL-2160p")
    BLURAY_2160P = (19, "Bluray-2160p")

    def __init__(self, quality_id: int, label: str) -> None:
        self.id = quality_id
        self.label = label

    def __str__(self) -> str:
        return self.label


_SOURCES: dict[Quality, QualitySource] = {
    Quality.BLURAY_2160P: QualitySource.BLURAY,
    Quality.BLURAY_1080P: QualitySource.BLURAY,
    Quality.BLURAY_720P: QualitySource.BLURAY,
    Quality.WEBDL_2160P: QualitySource.WEB,
    Quality.WEBDL_1080P: QualitySource.WEB,
    Quality.WEBDL_720P: QualitySource.WEB,
    Quality.WEBDL_480P: QualitySource.WEB,
    Quality.DVD: QualitySource.DVD,
    Quality.RAWHD: QualitySource.TELEVISION,
    Quality.HDTV_2160P: QualitySource.TELEVISION,
    Quality.HDTV_1080P: QualitySource.TELEVISION,
    Quality.HDTV_720P: QualitySource.TELEVISION,
    Quality.SDTV: QualitySource.TELEVISION,
}


def quality_source_for(quality: Quality) -> QualitySource:
    """Return the release source of a quality tier."""
    return _SOURCES.get(quality, QualitySource.UNKNOWN)
