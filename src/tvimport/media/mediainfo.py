"""
MediaInfo reader for video container metadata.

Runs the MediaInfo CLI with JSON output and reduces it to the handful of
facts the import pipeline needs (resolution, codecs, runtime).

Key pieces:
    - MediaInfoModel: read-only container facts
    - parse_media_info(): MediaInfo JSON -> MediaInfoModel (None without a video track)
    - VideoFileInfoReader: runs the CLI with retry and never raises for unreadable files
"""

from __future__ import annotations

import json
import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from tvimport.config import get_settings
from tvimport.exceptions import MediaInfoError
from tvimport.utils.retry import SUBPROCESS_EXCEPTIONS, RetryableError, retry_with_backoff

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MediaInfoModel:
    """Container-level facts about a video file."""

    width: int
    height: int
    video_codec: str = ""
    audio_codec: str = ""
    audio_channels: int = 0
    run_time_seconds: float = 0.0
    container_format: str = ""


def _to_int(value: Any, default: int = 0) -> int:
    try:
        return int(float(value))
    except (ValueError, TypeError):
        return default


def _to_float(value: Any, default: float = 0.0) -> float:
    try:
        return float(value)
    except (ValueError, TypeError):
        return default


def _first_track(tracks: list[dict[str, Any]], track_type: str) -> dict[str, Any] | None:
    for track in tracks:
        if track.get("@type") == track_type:
            return track
    return None


def parse_media_info(mediainfo_data: dict[str, Any] | None) -> MediaInfoModel | None:
    """
    Extract video facts from MediaInfo JSON.

    Args:
        mediainfo_data: Parsed output of ``mediainfo --Output=JSON``

    Returns:
        MediaInfoModel, or None if there is no video track.

    Example MediaInfo video track:
        {
            "@type": "Video",
            "Format": "AVC",
            "Width": "1920",
            "Height": "1080",
            "Duration": "2640.072"
        }
    """
    if not mediainfo_data:
        return None

    media = mediainfo_data.get("media")
    if not media:
        return None

    tracks = media.get("track", [])
    video = _first_track(tracks, "Video")
    if video is None:
        logger.debug("No video track found in MediaInfo")
        return None

    general = _first_track(tracks, "General") or {}
    audio = _first_track(tracks, "Audio") or {}

    run_time = _to_float(general.get("Duration"))
    if not run_time:
        run_time = _to_float(video.get("Duration"))

    return MediaInfoModel(
        width=_to_int(video.get("Width")),
        height=_to_int(video.get("Height")),
        video_codec=video.get("Format", ""),
        audio_codec=audio.get("Format", ""),
        audio_channels=_to_int(audio.get("Channels")),
        run_time_seconds=run_time,
        container_format=general.get("Format", ""),
    )


class VideoFileInfoReader:
    """Reads MediaInfoModel for a path via the MediaInfo CLI."""

    def __init__(
        self,
        binary: str | None = None,
        *,
        timeout: int | None = None,
        max_retries: int | None = None,
        retry_delay: float = 1.0,
    ) -> None:
        if binary is None or timeout is None or max_retries is None:
            settings = get_settings().mediainfo
            binary = binary or settings.binary
            timeout = timeout if timeout is not None else settings.timeout
            max_retries = max_retries if max_retries is not None else settings.max_retries
        self.binary = binary
        self.timeout = timeout
        self.max_retries = max_retries

        self._run = retry_with_backoff(
            max_retries=self.max_retries,
            base_delay=retry_delay,
            max_delay=10.0,
            jitter=retry_delay,
            retry_exceptions=SUBPROCESS_EXCEPTIONS,
            logger_instance=logger,
        )(self._run_subprocess)

    def _run_subprocess(self, cmd: list[str]) -> subprocess.CompletedProcess[str]:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            check=True,
            timeout=self.timeout,
        )
        if not result.stdout.strip():
            # Seen while a download client is still flushing the file
            raise RetryableError(f"mediainfo returned no output for {cmd[-1]}")
        return result

    def run_mediainfo(self, path: Path) -> dict[str, Any]:
        """
        Run mediainfo on a file and return parsed JSON output.

        Raises:
            MediaInfoError: If the binary is missing, the run fails, or the
                output is not JSON
        """
        cmd = [self.binary, "--Output=JSON", str(path)]
        logger.debug("Running mediainfo: %s", " ".join(cmd))

        try:
            result = self._run(cmd)
        except FileNotFoundError as e:
            raise MediaInfoError(f"mediainfo binary not found: {self.binary}", command=cmd[0]) from e
        except OSError as e:
            raise MediaInfoError(f"Unable to run mediainfo: {e}", command=cmd[0]) from e
        except subprocess.CalledProcessError as e:
            raise MediaInfoError(
                f"mediainfo failed for {path.name}",
                command=" ".join(cmd),
                return_code=e.returncode,
                stderr=e.stderr,
            ) from e
        except (subprocess.TimeoutExpired, RetryableError) as e:
            raise MediaInfoError(f"mediainfo gave up on {path.name}: {e}", command=" ".join(cmd)) from e

        try:
            data: dict[str, Any] = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise MediaInfoError(f"mediainfo output for {path.name} is not JSON: {e}") from e
        return data

    def get_media_info(self, path: Path | str) -> MediaInfoModel | None:
        """MediaInfoModel for a file, or None if it cannot be read as video."""
        file_path = Path(path)
        if not file_path.is_file():
            logger.debug("File not found for mediainfo: %s", file_path)
            return None

        try:
            data = self.run_mediainfo(file_path)
        except MediaInfoError as e:
            logger.warning("Unable to read media info from %s: %s", file_path, e)
            return None

        media_info = parse_media_info(data)
        if media_info is not None:
            logger.debug(
                "Media info for %s: %dx%d %s",
                file_path.name,
                media_info.width,
                media_info.height,
                media_info.video_codec,
            )
        return media_info
