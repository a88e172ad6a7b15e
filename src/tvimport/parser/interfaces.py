"""Contracts for the title parser and episode lookup collaborators."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tvimport.tv.models import Episode, Series

    from .models import ParsedEpisodeInfo


class TitleParser(Protocol):
    """Turns release/file names into ParsedEpisodeInfo.

    Both methods return None for unparseable input and never raise for
    malformed text.
    """

    def parse_title(self, title: str) -> ParsedEpisodeInfo | None: ...

    def parse_path(self, path: Path | str) -> ParsedEpisodeInfo | None: ...


class ParsingService(Protocol):
    """Resolves parsed identities against a series' episode catalog."""

    def get_episodes(
        self,
        parsed_episode_info: ParsedEpisodeInfo,
        series: Series,
        scene_source: bool,
    ) -> Sequence[Episode]:
        """Catalog episodes for a parsed identity (possibly empty).

        Only raises for transport/storage failures, never for an unknown identity.
        """
        ...

    def parse_special_episode_title(
        self,
        title: str,
        series: Series,
    ) -> ParsedEpisodeInfo | None:
        """Match a bare title against the series' special episodes."""
        ...
