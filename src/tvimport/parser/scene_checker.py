"""Detection of self-describing scene release names."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tvimport.qualities import Quality

if TYPE_CHECKING:
    from .interfaces import TitleParser


def is_scene_title(title: str, parser: TitleParser) -> bool:
    """True if ``title`` follows release-group naming (``Series.S01E01.720p.HDTV-GRP``).

    A scene title is dot-separated with no spaces and parses to a series
    title, a known quality and a release group.
    """
    if "." not in title or " " in title:
        return False

    parsed = parser.parse_title(title)
    if parsed is None:
        return False

    return bool(
        parsed.release_group
        and parsed.quality.quality != Quality.UNKNOWN
        and parsed.series_title.strip()
    )
