"""Parsed episode models, parser contracts and scene-name detection."""

from __future__ import annotations

from .interfaces import ParsingService, TitleParser
from .models import LocalEpisode, ParsedEpisodeInfo
from .scene_checker import is_scene_title

__all__ = [
    "LocalEpisode",
    "ParsedEpisodeInfo",
    "ParsingService",
    "TitleParser",
    "is_scene_title",
]
