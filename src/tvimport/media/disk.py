"""Local filesystem queries used by the import pipeline."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from tvimport.exceptions import DiskError, FileMissingError

logger = logging.getLogger(__name__)


class LocalDiskProvider:
    """Size, existence and free-space queries against the local filesystem."""

    def get_file_size(self, path: Path | str) -> int:
        """Size of a file in bytes.

        Raises:
            FileMissingError: If the file does not exist
            DiskError: If the file exists but cannot be stat'ed
        """
        file_path = Path(path)
        if not file_path.is_file():
            raise FileMissingError(f"File not found: {file_path}", path=file_path)
        try:
            return file_path.stat().st_size
        except OSError as e:
            raise DiskError(f"Unable to read size of {file_path}: {e}", path=file_path) from e

    def file_exists(self, path: Path | str) -> bool:
        return Path(path).is_file()

    def get_available_space(self, path: Path | str) -> int | None:
        """Free bytes on the volume holding ``path``.

        Walks up to the nearest existing parent so a series folder that has
        not been created yet still reports its volume. Returns None if no
        parent exists or the query fails.
        """
        candidate = Path(path)
        while not candidate.exists():
            if candidate.parent == candidate:
                return None
            candidate = candidate.parent

        try:
            return shutil.disk_usage(candidate).free
        except OSError as e:
            logger.debug("Unable to check free space for %s: %s", candidate, e)
            return None
