"""Profile-scoped ordering of QualityModel values."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .model import QualityModel
    from .profile import Profile


class QualityModelComparer:
    """Compare two quality models by a profile's ranking.

    Tiers are compared by their position in the profile; revision only
    decides between equal tiers. Tiers missing from the profile rank below
    everything in it.
    """

    def __init__(self, profile: Profile) -> None:
        self.profile = profile

    def compare(self, left: QualityModel, right: QualityModel) -> int:
        """Return negative, zero or positive as ``left`` ranks below, equal or above ``right``."""
        result = self.profile.index_of(left.quality) - self.profile.index_of(right.quality)
        if result != 0:
            return result

        if left.revision == right.revision:
            return 0
        return 1 if left.revision > right.revision else -1
