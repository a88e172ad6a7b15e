"""Import specifications: accept/reject rules for augmented files."""

from __future__ import annotations

from .base import Decision, ImportSpecification
from .free_space import FreeSpaceSpecification
from .full_season import FullSeasonSpecification
from .not_sample import NotSampleSpecification
from .upgrade import UpgradeSpecification

__all__ = [
    "Decision",
    "FreeSpaceSpecification",
    "FullSeasonSpecification",
    "ImportSpecification",
    "NotSampleSpecification",
    "UpgradeSpecification",
]
