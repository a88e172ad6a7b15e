"""Default wiring of the import decision pipeline."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tvimport.config import get_settings
from tvimport.media.disk import LocalDiskProvider
from tvimport.media.mediainfo import VideoFileInfoReader

from .augmenting import AugmentEpisodes, AugmentingService, AugmentQuality, LocalEpisodeAugmenter
from .decision_maker import ImportDecisionMaker
from .registry import PluginRegistry
from .specifications import (
    FreeSpaceSpecification,
    FullSeasonSpecification,
    ImportSpecification,
    NotSampleSpecification,
    UpgradeSpecification,
)

if TYPE_CHECKING:
    from tvimport.config import Settings
    from tvimport.parser.interfaces import ParsingService, TitleParser

    from .interfaces import DiskProvider, MediaFileService, MediaInfoReader, SampleDetector

logger = logging.getLogger(__name__)


def default_augmenters(parsing_service: ParsingService) -> PluginRegistry[LocalEpisodeAugmenter]:
    """Quality first, then episode lookup."""
    return PluginRegistry.of([AugmentQuality(), AugmentEpisodes(parsing_service)])


def default_specifications(
    sample_detector: SampleDetector,
    disk_provider: DiskProvider,
    settings: Settings,
) -> PluginRegistry[ImportSpecification]:
    return PluginRegistry.of(
        [
            FullSeasonSpecification(),
            NotSampleSpecification(sample_detector),
            FreeSpaceSpecification(disk_provider, settings.importing),
            UpgradeSpecification(),
        ]
    )


def create_decision_maker(
    parsing_service: ParsingService,
    title_parser: TitleParser,
    media_file_service: MediaFileService,
    sample_detector: SampleDetector,
    *,
    disk_provider: DiskProvider | None = None,
    media_info_reader: MediaInfoReader | None = None,
    settings: Settings | None = None,
) -> ImportDecisionMaker:
    """
    Build an ImportDecisionMaker with the built-in augmenters and specifications.

    Args:
        parsing_service: Episode catalog lookup
        title_parser: Release/file name parser
        media_file_service: Filter for files already imported
        sample_detector: Sample classifier
        disk_provider: Defaults to LocalDiskProvider
        media_info_reader: Defaults to VideoFileInfoReader using the mediainfo settings
        settings: Defaults to get_settings()

    Returns:
        Ready-to-use decision maker; its ``specifications`` registry and its
        augmenting service's ``augmenters`` registry can be extended further.
    """
    settings = settings or get_settings()
    disk_provider = disk_provider or LocalDiskProvider()
    if media_info_reader is None:
        media_info_reader = VideoFileInfoReader(
            settings.mediainfo.binary,
            timeout=settings.mediainfo.timeout,
            max_retries=settings.mediainfo.max_retries,
        )

    augmenting_service = AugmentingService(
        default_augmenters(parsing_service),
        parsing_service,
        disk_provider,
        media_info_reader,
        title_parser,
        extra_media_extensions=settings.importing.extra_media_extensions,
    )
    specifications = default_specifications(sample_detector, disk_provider, settings)
    logger.debug(
        "Decision maker ready: augmenters=%s specifications=%s",
        [a.name for a in augmenting_service.augmenters],
        [s.name for s in specifications],
    )

    return ImportDecisionMaker(
        specifications,
        media_file_service,
        augmenting_service,
        sample_detector,
        title_parser,
    )
