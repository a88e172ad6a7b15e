"""
Import decision pipeline.

Typical use::

    maker = create_decision_maker(parsing_service, title_parser, media_files, samples)
    for decision in maker.get_import_decisions(paths, series, download_client_item):
        if decision.approved:
            ...
"""

from __future__ import annotations

from .augmenting import AugmentEpisodes, AugmentingService, AugmentQuality, LocalEpisodeAugmenter
from .decision_maker import ImportDecisionMaker
from .factory import create_decision_maker, default_augmenters, default_specifications
from .interfaces import (
    DetectSampleResult,
    DiskProvider,
    MediaFileService,
    MediaInfoReader,
    SampleDetector,
)
from .models import DownloadClientItem, ImportDecision, Rejection, RejectionType
from .registry import PluginRegistry
from .specifications import Decision, ImportSpecification

__all__ = [
    "AugmentEpisodes",
    "AugmentQuality",
    "AugmentingService",
    "Decision",
    "DetectSampleResult",
    "DiskProvider",
    "DownloadClientItem",
    "ImportDecision",
    "ImportDecisionMaker",
    "ImportSpecification",
    "LocalEpisodeAugmenter",
    "MediaFileService",
    "MediaInfoReader",
    "PluginRegistry",
    "Rejection",
    "RejectionType",
    "SampleDetector",
    "create_decision_maker",
    "default_augmenters",
    "default_specifications",
]
