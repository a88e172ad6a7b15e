"""Recognized video file extensions."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

MEDIA_FILE_EXTENSIONS: frozenset[str] = frozenset(
    {
        # Web/streaming
        ".webm", ".m4v", ".3gp", ".nsv", ".ty", ".strm", ".rm", ".rmvb", ".m3u",
        ".ifo", ".mov", ".qt", ".divx", ".xvid", ".bivx", ".nrg", ".pva", ".wmv",
        ".asf", ".asx", ".ogm", ".ogv", ".m2v", ".avi", ".bin", ".dat", ".dvr-ms",
        ".mpg", ".mpeg", ".mp4", ".avc", ".vp3", ".svq3", ".nuv", ".viv", ".dv",
        ".fli", ".flv", ".wpl",
        # Disc images
        ".img", ".iso", ".vob",
        # HD
        ".mkv", ".mk3d", ".ts", ".wtv",
        # Bluray
        ".m2ts",
    }
)  # fmt: skip


def is_media_file(path: Path | str, extra: Iterable[str] = ()) -> bool:
    """True if the path's extension is a known video extension (case-insensitive)."""
    suffix = Path(path).suffix.lower()
    if not suffix:
        return False
    return suffix in MEDIA_FILE_EXTENSIONS or suffix in {ext.lower() for ext in extra}
