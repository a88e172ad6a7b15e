"""Episode identity resolution against the series catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import LocalEpisodeAugmenter

if TYPE_CHECKING:
    from tvimport.parser.interfaces import ParsingService
    from tvimport.parser.models import LocalEpisode


class AugmentEpisodes(LocalEpisodeAugmenter):
    """Look up the catalog episodes for the winning parsed info."""

    def __init__(self, parsing_service: ParsingService) -> None:
        self.parsing_service = parsing_service

    def augment(self, local_episode: LocalEpisode, other_files: bool) -> LocalEpisode:
        if local_episode.parsed_episode_info is None:
            return local_episode

        local_episode.episodes = list(
            self.parsing_service.get_episodes(
                local_episode.parsed_episode_info,
                local_episode.series,
                local_episode.scene_source,
            )
        )
        return local_episode
