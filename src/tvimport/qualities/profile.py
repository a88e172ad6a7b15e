"""Quality profiles: the per-series ranking of quality tiers."""

from __future__ import annotations

from dataclasses import dataclass, field

from .quality import Quality

# Lowest to highest, as shipped by default.
DEFAULT_QUALITY_ORDER: tuple[Quality, ...] = (
    Quality.UNKNOWN,
    Quality.SDTV,
    Quality.WEBDL_480P,
    Quality.DVD,
    Quality.HDTV_720P,
    Quality.HDTV_1080P,
    Quality.RAWHD,
    Quality.WEBDL_720P,
    Quality.BLURAY_720P,
    Quality.WEBDL_1080P,
    Quality.BLURAY_1080P,
    Quality.HDTV_2160P,
    Quality.WEBDL_2160P,
    Quality.BLURAY_2160P,
)


@dataclass
class Profile:
    """Ordered list of quality tiers; later items rank higher."""

    name: str
    items: list[Quality] = field(default_factory=list)

    def index_of(self, quality: Quality) -> int:
        """Position of ``quality`` in the ranking, or -1 if absent."""
        if quality in self.items:
            return self.items.index(quality)
        return -1


def default_profile(name: str = "Any") -> Profile:
    """Profile ranking every quality in the default order."""
    return Profile(name=name, items=list(DEFAULT_QUALITY_ORDER))
