"""
Import decisions for a batch of candidate video files.

Every file that survives the already-imported filter yields exactly one
ImportDecision. Nothing raised while deciding on one file escapes the batch:

- AugmentingFailedError -> "Unable to parse file"
- a specification that raises -> "<SpecificationName>: <error>"
- anything else -> "Unexpected error processing file" (logged with traceback)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from tvimport.exceptions import AugmentingFailedError
from tvimport.importing.interfaces import DetectSampleResult
from tvimport.importing.models import ImportDecision, Rejection
from tvimport.importing.registry import PluginRegistry
from tvimport.importing.specifications.base import ImportSpecification
from tvimport.parser.models import LocalEpisode

if TYPE_CHECKING:
    from tvimport.importing.augmenting.service import AugmentingService
    from tvimport.importing.interfaces import MediaFileService, SampleDetector
    from tvimport.importing.models import DownloadClientItem
    from tvimport.parser.interfaces import TitleParser
    from tvimport.parser.models import ParsedEpisodeInfo
    from tvimport.tv.models import Series

logger = logging.getLogger(__name__)


class ImportDecisionMaker:
    """Decide, file by file, whether candidates can be imported."""

    def __init__(
        self,
        specifications: PluginRegistry[ImportSpecification] | Iterable[ImportSpecification],
        media_file_service: MediaFileService,
        augmenting_service: AugmentingService,
        sample_detector: SampleDetector,
        title_parser: TitleParser,
    ) -> None:
        if isinstance(specifications, PluginRegistry):
            self.specifications = specifications
        else:
            self.specifications = PluginRegistry.of(specifications)
        self.media_file_service = media_file_service
        self.augmenting_service = augmenting_service
        self.sample_detector = sample_detector
        self.title_parser = title_parser

    def get_import_decisions(
        self,
        video_files: Sequence[str],
        series: Series,
        download_client_item: DownloadClientItem | None = None,
        folder_info: ParsedEpisodeInfo | None = None,
        scene_source: bool = False,
        existing_file: bool = False,
    ) -> list[ImportDecision]:
        """
        Build one decision per new file.

        Args:
            video_files: Candidate file paths
            series: Series the files belong to
            download_client_item: Download job the files came from, if any
            folder_info: Parsed identity of the containing folder, if any
            scene_source: True when names follow scene numbering
            existing_file: True when re-evaluating files already inside the
                series folder; sample and free space checks pass them

        Returns:
            Decisions in input order for every file not already imported
        """
        new_files = self.media_file_service.filter_existing_files(list(video_files), series)
        logger.debug("Analyzing %d/%d files.", len(new_files), len(video_files))

        download_client_item_info: ParsedEpisodeInfo | None = None
        if download_client_item is not None:
            download_client_item_info = self.title_parser.parse_title(download_client_item.title)

        non_sample_count = self._non_sample_video_file_count(
            new_files, series, download_client_item_info, folder_info
        )
        other_files = non_sample_count > 1

        return [
            self._get_decision(
                file,
                series,
                download_client_item,
                download_client_item_info,
                folder_info,
                other_files,
                scene_source,
                existing_file,
            )
            for file in new_files
        ]

    def _get_decision(
        self,
        file: str,
        series: Series,
        download_client_item: DownloadClientItem | None,
        download_client_episode_info: ParsedEpisodeInfo | None,
        folder_episode_info: ParsedEpisodeInfo | None,
        other_files: bool,
        scene_source: bool,
        existing_file: bool,
    ) -> ImportDecision:
        local_episode = LocalEpisode(
            path=Path(file),
            series=series,
            download_client_episode_info=download_client_episode_info,
            folder_episode_info=folder_episode_info,
            scene_source=scene_source,
            existing_file=existing_file,
        )

        try:
            local_episode.file_episode_info = self.title_parser.parse_path(file)
            self.augmenting_service.augment(local_episode, other_files)

            if not local_episode.episodes:
                parsed = local_episode.parsed_episode_info
                if parsed is not None and parsed.is_partial_season:
                    return ImportDecision.rejected(
                        local_episode, Rejection("Partial season packs are not supported")
                    )
                return ImportDecision.rejected(local_episode, Rejection("Invalid season or episode"))

            return self._evaluate_specifications(local_episode, download_client_item)

        except AugmentingFailedError as e:
            logger.debug("Unable to parse %s: %s", file, e)
            return ImportDecision.rejected(local_episode, Rejection("Unable to parse file"))
        except Exception:
            logger.error("Couldn't import file. %s", file, exc_info=True)
            return ImportDecision.rejected(
                local_episode, Rejection("Unexpected error processing file")
            )

    def _evaluate_specifications(
        self,
        local_episode: LocalEpisode,
        download_client_item: DownloadClientItem | None,
    ) -> ImportDecision:
        rejections = [
            rejection
            for spec in self.specifications
            if (rejection := self._evaluate_spec(spec, local_episode, download_client_item))
            is not None
        ]
        return ImportDecision(local_episode=local_episode, rejections=tuple(rejections))

    def _evaluate_spec(
        self,
        spec: ImportSpecification,
        local_episode: LocalEpisode,
        download_client_item: DownloadClientItem | None,
    ) -> Rejection | None:
        try:
            result = spec.is_satisfied_by(local_episode, download_client_item)
        except Exception as e:
            logger.error("Couldn't evaluate decision on %s", local_episode.path, exc_info=True)
            return Rejection(f"{spec.name}: {e}")

        if not result.accepted:
            return Rejection(result.reason, result.rejection_type)
        return None

    def _non_sample_video_file_count(
        self,
        video_files: Sequence[str],
        series: Series,
        download_client_item_info: ParsedEpisodeInfo | None,
        folder_info: ParsedEpisodeInfo | None,
    ) -> int:
        # If we might already have a special, don't try to get it from the folder info
        is_possible_special = bool(
            (download_client_item_info and download_client_item_info.is_possible_special_episode)
            or (folder_info and folder_info.is_possible_special_episode)
        )

        return sum(1 for file in video_files if not self._is_sample(series, file, is_possible_special))

    def _is_sample(self, series: Series, file: str, is_possible_special: bool) -> bool:
        try:
            result = self.sample_detector.is_sample(series, file, is_possible_special)
        except Exception as e:
            logger.warning("Sample detection failed for %s: %s", file, e)
            return False
        return result == DetectSampleResult.SAMPLE
