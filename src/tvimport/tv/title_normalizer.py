"""
Series title normalization for matching.

Handles:
- Separator runs (``.``, ``_``, ``-``, ``,``, ``|``) collapsed to single spaces
- Punctuation stripped
- Leading article ("The", "A", "An") dropped
- Known TVDB ids whose titles normalize badly mapped to a fixed value
"""

from __future__ import annotations

import re

# Titles that normalize to something useless (e.g. "A to Z" -> "to z").
PRECOMPUTED_TITLES: dict[int, str] = {
    281588: "a to z",
    289260: "ad bible continues",
    328534: "ap bio",
}

_WORD_DELIMITERS = re.compile(r"[\s.,_\-=|]+")
_PUNCTUATION = re.compile(r"[^\w\s]")
_LEADING_ARTICLE = re.compile(r"^(?:the|an|a)\s+", re.IGNORECASE)


def normalize_title(title: str) -> str:
    """Lower-case, punctuation-free form of a title."""
    cleaned = _WORD_DELIMITERS.sub(" ", title)
    cleaned = _PUNCTUATION.sub("", cleaned).strip()
    cleaned = _LEADING_ARTICLE.sub("", cleaned)
    return " ".join(cleaned.split()).lower()


def normalize_series_title(title: str, tvdb_id: int) -> str:
    """Normalize a series title, honoring the per-series override table."""
    if tvdb_id in PRECOMPUTED_TITLES:
        return PRECOMPUTED_TITLES[tvdb_id]
    return normalize_title(title)
