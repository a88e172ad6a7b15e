"""Import decision results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tvimport.parser.models import LocalEpisode


class RejectionType(Enum):
    """Whether retrying later could change the outcome."""

    PERMANENT = "permanent"
    TEMPORARY = "temporary"


@dataclass(frozen=True)
class Rejection:
    """A reason a file will not be imported."""

    reason: str
    type: RejectionType = RejectionType.PERMANENT

    def __str__(self) -> str:
        return f"[{self.type.value}] {self.reason}"


@dataclass(frozen=True)
class DownloadClientItem:
    """The download job a batch of files came from."""

    title: str
    download_id: str = ""
    output_path: Path | None = None


@dataclass(frozen=True)
class ImportDecision:
    """Final verdict for one file; approved when it carries no rejections."""

    local_episode: LocalEpisode
    rejections: tuple[Rejection, ...] = ()

    @property
    def approved(self) -> bool:
        return not self.rejections

    @property
    def reasons(self) -> list[str]:
        return [r.reason for r in self.rejections]

    @classmethod
    def rejected(cls, local_episode: LocalEpisode, *rejections: Rejection) -> ImportDecision:
        return cls(local_episode=local_episode, rejections=tuple(rejections))
