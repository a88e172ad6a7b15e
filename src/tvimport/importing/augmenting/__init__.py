"""Augmenters and the service that runs them."""

from __future__ import annotations

from .base import LocalEpisodeAugmenter
from .episodes import AugmentEpisodes
from .quality import AugmentQuality, quality_from_media_info, should_prefer_other
from .service import AugmentingService

__all__ = [
    "AugmentEpisodes",
    "AugmentQuality",
    "AugmentingService",
    "LocalEpisodeAugmenter",
    "quality_from_media_info",
    "should_prefer_other",
]
