"""Quality resolution across file, folder, download and media info sources."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tvimport.qualities import (
    Quality,
    QualityDetectionSource,
    QualityModel,
    QualityModelComparer,
    QualitySource,
)

from .base import LocalEpisodeAugmenter

if TYPE_CHECKING:
    from tvimport.media.mediainfo import MediaInfoModel
    from tvimport.parser.models import LocalEpisode
    from tvimport.tv.models import Series

logger = logging.getLogger(__name__)

# (minimum exclusive width, resolution) checked top-down
_WIDTH_BANDS: tuple[tuple[int, int], ...] = (
    (1920, 2160),
    (1280, 1080),
    (854, 720),
)

_MEDIA_INFO_QUALITIES: dict[tuple[int, QualitySource], Quality] = {
    (2160, QualitySource.BLURAY): Quality.BLURAY_2160P,
    (2160, QualitySource.WEB): Quality.WEBDL_2160P,
    (2160, QualitySource.TELEVISION): Quality.HDTV_2160P,
    (1080, QualitySource.BLURAY): Quality.BLURAY_1080P,
    (1080, QualitySource.WEB): Quality.WEBDL_1080P,
    (1080, QualitySource.TELEVISION): Quality.HDTV_1080P,
    (720, QualitySource.BLURAY): Quality.BLURAY_720P,
    (720, QualitySource.WEB): Quality.WEBDL_720P,
    (720, QualitySource.TELEVISION): Quality.HDTV_720P,
}


def resolution_for_width(width: int) -> int | None:
    """Resolution tier implied by a pixel width, or None below 720p."""
    for min_width, resolution in _WIDTH_BANDS:
        if width > min_width:
            return resolution
    return None


class AugmentQuality(LocalEpisodeAugmenter):
    """Decide the authoritative quality for a file.

    Order:
        1. Start from the file name's quality.
        2. Prefer the download job's quality, else the folder's, when
           should_prefer_other() says so.
        3. Let the container's pixel width correct the resolution while
           keeping the source (DVD/unknown sources are left alone).
    """

    def augment(self, local_episode: LocalEpisode, other_files: bool) -> LocalEpisode:
        if local_episode.file_episode_info is None:
            return local_episode

        series = local_episode.series
        quality = local_episode.file_episode_info.quality
        download_client_quality = (
            local_episode.download_client_episode_info.quality
            if local_episode.download_client_episode_info
            else None
        )
        folder_quality = (
            local_episode.folder_episode_info.quality if local_episode.folder_episode_info else None
        )

        if should_prefer_other(series, quality, download_client_quality):
            logger.debug(
                "Using quality: %s from download client item instead of file quality: %s",
                download_client_quality,
                quality,
            )
            quality = download_client_quality
        elif should_prefer_other(series, quality, folder_quality):
            logger.debug(
                "Using quality: %s from folder instead of file quality: %s",
                folder_quality,
                quality,
            )
            quality = folder_quality

        quality = quality_from_media_info(quality, local_episode.media_info)

        logger.debug("Using quality: %s", quality)
        local_episode.quality = quality
        return local_episode


def should_prefer_other(
    series: Series,
    file_quality: QualityModel,
    other_quality: QualityModel | None,
) -> bool:
    """True if ``other_quality`` should replace the file name's quality.

    Unknown or missing qualities never win. A quality read only from the
    file extension always loses. Otherwise the series profile decides.
    """
    if other_quality is None or other_quality.quality == Quality.UNKNOWN:
        return False

    if file_quality.detection_source == QualityDetectionSource.EXTENSION:
        return True

    return QualityModelComparer(series.profile).compare(other_quality, file_quality) > 0


def quality_from_media_info(
    quality: QualityModel,
    media_info: MediaInfoModel | None,
) -> QualityModel:
    """Adjust the resolution of ``quality`` to the container's pixel width."""
    if media_info is None:
        return quality

    resolution = resolution_for_width(media_info.width)
    if resolution is None:
        return quality

    new_quality = _MEDIA_INFO_QUALITIES.get((resolution, quality.quality_source))
    if new_quality is None or new_quality == quality.quality:
        return quality

    logger.debug("Quality (%s) differs from the parsed quality (%s)", new_quality, quality.quality)
    return quality.with_quality(new_quality, QualityDetectionSource.MEDIA_INFO)
