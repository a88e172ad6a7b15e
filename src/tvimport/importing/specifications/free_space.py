"""Reserve free space on the series volume."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tvimport.importing.models import RejectionType

from .base import Decision, ImportSpecification

if TYPE_CHECKING:
    from tvimport.config import ImportingConfig
    from tvimport.importing.interfaces import DiskProvider
    from tvimport.importing.models import DownloadClientItem
    from tvimport.parser.models import LocalEpisode

logger = logging.getLogger(__name__)


class FreeSpaceSpecification(ImportSpecification):
    """Reject files that would leave the series volume below the configured reserve."""

    def __init__(self, disk_provider: DiskProvider, importing: ImportingConfig) -> None:
        self.disk_provider = disk_provider
        self.importing = importing

    def is_satisfied_by(
        self,
        local_episode: LocalEpisode,
        download_client_item: DownloadClientItem | None,
    ) -> Decision:
        if self.importing.skip_free_space_check:
            logger.debug("Skipping free space check")
            return Decision.accept()

        if local_episode.existing_file:
            return Decision.accept()

        root = local_episode.series.path
        free_space = self.disk_provider.get_available_space(root)
        if free_space is None:
            logger.warning("Unable to determine free disk space for %s, skipping check", root)
            return Decision.accept()

        remaining = free_space - local_episode.size
        if remaining < self.importing.minimum_free_space_bytes:
            logger.warning(
                "Not enough free space (%d bytes) to import %s (%d bytes)",
                free_space,
                local_episode.path,
                local_episode.size,
            )
            return Decision.reject("Not enough free space", RejectionType.TEMPORARY)

        return Decision.accept()
