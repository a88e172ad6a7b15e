"""Guard against single files named as a whole season."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .base import Decision, ImportSpecification

if TYPE_CHECKING:
    from tvimport.importing.models import DownloadClientItem
    from tvimport.parser.models import LocalEpisode

logger = logging.getLogger(__name__)


class FullSeasonSpecification(ImportSpecification):
    """Reject a single file whose own name claims a whole season."""

    def is_satisfied_by(
        self,
        local_episode: LocalEpisode,
        download_client_item: DownloadClientItem | None,
    ) -> Decision:
        file_info = local_episode.file_episode_info
        if file_info is not None and file_info.full_season:
            logger.debug("Single episode file detected as containing all episodes in the season")
            return Decision.reject("Single episode file contains all episodes in seasons")

        return Decision.accept()
