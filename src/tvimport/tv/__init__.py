"""Series catalog models and title normalization."""

from __future__ import annotations

from .models import Episode, EpisodeFile, Series
from .title_normalizer import normalize_series_title, normalize_title

__all__ = [
    "Episode",
    "EpisodeFile",
    "Series",
    "normalize_series_title",
    "normalize_title",
]
