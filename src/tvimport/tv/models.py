"""Series and episode catalog models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from tvimport.qualities import Profile, QualityModel, default_profile

from .title_normalizer import normalize_series_title


@dataclass
class EpisodeFile:
    """A file already imported for one or more episodes."""

    path: Path
    quality: QualityModel
    size: int = 0


@dataclass
class Episode:
    """A catalog episode a local file can resolve to."""

    id: int
    season_number: int
    episode_number: int
    title: str = ""
    episode_file: EpisodeFile | None = None

    @property
    def has_file(self) -> bool:
        return self.episode_file is not None

    def __str__(self) -> str:
        return f"S{self.season_number:02d}E{self.episode_number:02d}"


@dataclass
class Series:
    """A monitored show."""

    id: int
    title: str
    path: Path
    profile: Profile = field(default_factory=default_profile)
    tvdb_id: int = 0

    @property
    def clean_title(self) -> str:
        """Normalized title used for matching parsed names."""
        return normalize_series_title(self.title, self.tvdb_id)

    def __str__(self) -> str:
        return f"[{self.id}][{self.title}]"
