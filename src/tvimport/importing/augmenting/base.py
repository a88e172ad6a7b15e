"""Base class for local episode augmenters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tvimport.parser.models import LocalEpisode


class LocalEpisodeAugmenter(ABC):
    """A step that enriches or corrects a LocalEpisode in place.

    Augmenters run after the AugmentingService has chosen
    ``parsed_episode_info`` and attached size and media info. A failing
    augmenter is logged and skipped; it never aborts the remaining chain.
    """

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def augment(self, local_episode: LocalEpisode, other_files: bool) -> LocalEpisode:
        """Mutate ``local_episode`` and return it.

        Args:
            local_episode: Working record for the file
            other_files: True when the folder holds more than one real video
        """
