"""
Augmenting orchestration for a single local file.

Picks the best parsed identity among the file, folder and download job
candidates, attaches size and media info, then runs every registered
augmenter with per-augmenter fault isolation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from tvimport.exceptions import AugmentingFailedError
from tvimport.importing.registry import PluginRegistry
from tvimport.media.extensions import is_media_file
from tvimport.parser.scene_checker import is_scene_title

from .base import LocalEpisodeAugmenter

if TYPE_CHECKING:
    from tvimport.importing.interfaces import DiskProvider, MediaInfoReader
    from tvimport.parser.interfaces import ParsingService, TitleParser
    from tvimport.parser.models import LocalEpisode, ParsedEpisodeInfo

logger = logging.getLogger(__name__)


class AugmentingService:
    """Fill in a LocalEpisode from all available sources."""

    def __init__(
        self,
        augmenters: PluginRegistry[LocalEpisodeAugmenter] | Iterable[LocalEpisodeAugmenter],
        parsing_service: ParsingService,
        disk_provider: DiskProvider,
        media_info_reader: MediaInfoReader,
        title_parser: TitleParser,
        *,
        extra_media_extensions: Iterable[str] = (),
    ) -> None:
        if isinstance(augmenters, PluginRegistry):
            self.augmenters = augmenters
        else:
            self.augmenters = PluginRegistry.of(augmenters)
        self.parsing_service = parsing_service
        self.disk_provider = disk_provider
        self.media_info_reader = media_info_reader
        self.title_parser = title_parser
        self.extra_media_extensions = tuple(extra_media_extensions)

    def augment(self, local_episode: LocalEpisode, other_files: bool) -> LocalEpisode:
        """
        Augment ``local_episode`` in place and return it.

        Args:
            local_episode: Working record with its parsed candidates set
            other_files: True when the folder holds more than one real video,
                which makes folder/job identity unreliable

        Raises:
            AugmentingFailedError: If no identity could be parsed for a media file
        """
        local_episode.parsed_episode_info = self._get_best_episode_info(local_episode, other_files)

        if local_episode.parsed_episode_info is None and is_media_file(
            local_episode.path, self.extra_media_extensions
        ):
            raise AugmentingFailedError(
                f"Unable to parse episode info from path: {local_episode.path}",
                path=local_episode.path,
            )

        local_episode.size = self.disk_provider.get_file_size(local_episode.path)
        local_episode.media_info = self.media_info_reader.get_media_info(local_episode.path)

        for augmenter in self.augmenters:
            try:
                augmenter.augment(local_episode, other_files)
            except Exception as e:
                logger.warning(
                    "Augmenter %s failed for %s: %s",
                    augmenter.name,
                    local_episode.path,
                    e,
                    exc_info=True,
                )

        return local_episode

    def _get_best_episode_info(
        self,
        local_episode: LocalEpisode,
        other_files: bool,
    ) -> ParsedEpisodeInfo | None:
        parsed_episode_info = local_episode.file_episode_info
        download_client_info = local_episode.download_client_episode_info
        folder_info = local_episode.folder_episode_info
        file_title = local_episode.path.stem

        if not other_files and not is_scene_title(file_title, self.title_parser):
            if download_client_info is not None and not download_client_info.full_season:
                parsed_episode_info = download_client_info
            elif folder_info is not None and not folder_info.full_season:
                parsed_episode_info = folder_info

        if parsed_episode_info is None or parsed_episode_info.is_possible_special_episode:
            logger.debug("Checking %s against special episode titles", file_title)
            return self.parsing_service.parse_special_episode_title(file_title, local_episode.series)

        return parsed_episode_info
