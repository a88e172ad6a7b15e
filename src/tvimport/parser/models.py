"""Parsed episode identity and the per-file working record."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from tvimport.qualities import QualityModel

if TYPE_CHECKING:
    from tvimport.media.mediainfo import MediaInfoModel
    from tvimport.tv.models import Episode, Series


@dataclass(frozen=True)
class ParsedEpisodeInfo:
    """Episode identity parsed out of a file, folder or download title.

    Produced by an external title parser and never mutated afterwards.
    """

    series_title: str = ""
    season_number: int = 0
    episode_numbers: tuple[int, ...] = ()
    quality: QualityModel = field(default_factory=QualityModel)
    release_group: str | None = None
    full_season: bool = False
    is_partial_season: bool = False
    special: bool = False
    is_possible_special_episode: bool = False

    def __str__(self) -> str:
        if self.full_season:
            episodes = "[full season]"
        elif self.episode_numbers:
            episodes = "".join(f"E{n:02d}" for n in self.episode_numbers)
        else:
            episodes = "[unknown episode]"
        return f"{self.series_title} - S{self.season_number:02d}{episodes} {self.quality}"


@dataclass
class LocalEpisode:
    """Mutable working record for one candidate file.

    Created fresh per file by the decision maker and mutated in place by the
    augmenting stages, in this order:

    1. AugmentingService sets ``parsed_episode_info``, ``size`` and ``media_info``.
    2. Augmenters run in registration order (by default ``AugmentQuality``
       sets ``quality``, then ``AugmentEpisodes`` sets ``episodes``).

    Specifications only read it.
    """

    path: Path
    series: Series
    file_episode_info: ParsedEpisodeInfo | None = None
    folder_episode_info: ParsedEpisodeInfo | None = None
    download_client_episode_info: ParsedEpisodeInfo | None = None
    scene_source: bool = False
    existing_file: bool = False
    size: int = 0
    parsed_episode_info: ParsedEpisodeInfo | None = None
    episodes: list[Episode] = field(default_factory=list)
    media_info: MediaInfoModel | None = None
    quality: QualityModel | None = None

    def __str__(self) -> str:
        return str(self.path)
