"""Release revision (proper/repack/version counters)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Revision:
    """Fine-grained version of a release within one quality tier.

    Ordered by ``real`` first, then ``version``: a REAL release beats any
    number of propers.
    """

    real: int = 0
    version: int = 1

    def __str__(self) -> str:
        text = f"v{self.version}"
        if self.real > 0:
            text += " REAL" if self.real == 1 else f" REAL{self.real}"
        return text
