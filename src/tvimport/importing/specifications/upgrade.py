"""Quality upgrade check against files already on disk."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tvimport.qualities import QualityModelComparer

from .base import Decision, ImportSpecification

if TYPE_CHECKING:
    from tvimport.importing.models import DownloadClientItem
    from tvimport.parser.models import LocalEpisode

logger = logging.getLogger(__name__)


class UpgradeSpecification(ImportSpecification):
    """Reject files that would replace an existing file of higher quality."""

    def is_satisfied_by(
        self,
        local_episode: LocalEpisode,
        download_client_item: DownloadClientItem | None,
    ) -> Decision:
        if local_episode.quality is None:
            return Decision.accept()

        comparer = QualityModelComparer(local_episode.series.profile)
        for episode in local_episode.episodes:
            if not episode.has_file:
                continue
            if comparer.compare(episode.episode_file.quality, local_episode.quality) > 0:
                logger.debug(
                    "Existing file for %s (%s) is better than %s",
                    episode,
                    episode.episode_file.quality,
                    local_episode.quality,
                )
                return Decision.reject("Not an upgrade for existing episode file(s)")

        return Decision.accept()
