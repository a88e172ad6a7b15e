"""Quality tiers, revisions, profiles and comparison."""

from __future__ import annotations

from .comparer import QualityModelComparer
from .model import QualityDetectionSource, QualityModel
from .profile import DEFAULT_QUALITY_ORDER, Profile, default_profile
from .quality import Quality, QualitySource, quality_source_for
from .revision import Revision

__all__ = [
    "DEFAULT_QUALITY_ORDER",
    "Profile",
    "Quality",
    "QualityDetectionSource",
    "QualityModel",
    "QualityModelComparer",
    "QualitySource",
    "Revision",
    "default_profile",
    "quality_source_for",
]
