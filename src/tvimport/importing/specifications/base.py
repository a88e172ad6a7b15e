"""Base class and verdict type for import specifications."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tvimport.importing.models import RejectionType

if TYPE_CHECKING:
    from tvimport.importing.models import DownloadClientItem
    from tvimport.parser.models import LocalEpisode


@dataclass(frozen=True)
class Decision:
    """Verdict of one specification.

    A TEMPORARY rejection may clear on its own (e.g. once disk space is
    freed), so callers can retry the file later.
    """

    accepted: bool
    reason: str = ""
    rejection_type: RejectionType = RejectionType.PERMANENT

    @classmethod
    def accept(cls) -> Decision:
        return cls(accepted=True)

    @classmethod
    def reject(
        cls, reason: str, rejection_type: RejectionType = RejectionType.PERMANENT
    ) -> Decision:
        return cls(accepted=False, reason=reason, rejection_type=rejection_type)


class ImportSpecification(ABC):
    """A rule an augmented file must satisfy to be imported.

    The decision maker evaluates every registered specification; one that
    raises is turned into a rejection carrying its ``name``.
    """

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def is_satisfied_by(
        self,
        local_episode: LocalEpisode,
        download_client_item: DownloadClientItem | None,
    ) -> Decision: ...
