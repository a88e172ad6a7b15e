"""
Sample rejection.

Files already in the series folder skip detection; otherwise the detector
decides, with season 0 episodes treated as specials.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tvimport.importing.interfaces import DetectSampleResult

from .base import Decision, ImportSpecification

if TYPE_CHECKING:
    from tvimport.importing.interfaces import SampleDetector
    from tvimport.importing.models import DownloadClientItem
    from tvimport.parser.models import LocalEpisode

logger = logging.getLogger(__name__)


class NotSampleSpecification(ImportSpecification):
    """Reject sample clips bundled with a release."""

    def __init__(self, sample_detector: SampleDetector) -> None:
        self.sample_detector = sample_detector

    def is_satisfied_by(
        self,
        local_episode: LocalEpisode,
        download_client_item: DownloadClientItem | None,
    ) -> Decision:
        if local_episode.existing_file:
            logger.debug("Existing file, skipping sample check")
            return Decision.accept()

        is_special = any(episode.season_number == 0 for episode in local_episode.episodes)
        result = self.sample_detector.is_sample(local_episode.series, local_episode.path, is_special)

        if result == DetectSampleResult.SAMPLE:
            return Decision.reject("Sample")
        if result == DetectSampleResult.INDETERMINATE:
            return Decision.reject("Unable to determine if file is a sample")

        return Decision.accept()
