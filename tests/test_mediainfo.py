"""Tests for the MediaInfo reader (subprocess mocked)."""

from __future__ import annotations

import json
import logging
import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from tvimport.exceptions import MediaInfoError
from tvimport.media.mediainfo import MediaInfoModel, VideoFileInfoReader, parse_media_info

SAMPLE_OUTPUT = {
    "media": {
        "track": [
            {"@type": "General", "Format": "Matroska", "Duration": "2640.072"},
            {"@type": "Video", "Format": "AVC", "Width": "1920", "Height": "1080"},
            {"@type": "Audio", "Format": "AC-3", "Channels": "6"},
        ]
    }
}


def completed(stdout: str) -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(args=["mediainfo"], returncode=0, stdout=stdout, stderr="")


@pytest.fixture
def video(tmp_path: Path) -> Path:
    path = tmp_path / "s01e01.mkv"
    path.write_bytes(b"\x00" * 16)
    return path


@pytest.fixture
def reader() -> VideoFileInfoReader:
    return VideoFileInfoReader("mediainfo", timeout=5, max_retries=2, retry_delay=0)


class TestParseMediaInfo:
    """Tests for parse_media_info()."""

    def test_full_output(self) -> None:
        assert parse_media_info(SAMPLE_OUTPUT) == MediaInfoModel(
            width=1920,
            height=1080,
            video_codec="AVC",
            audio_codec="AC-3",
            audio_channels=6,
            run_time_seconds=2640.072,
            container_format="Matroska",
        )

    def test_no_video_track(self) -> None:
        data = {"media": {"track": [{"@type": "Audio", "Format": "AAC"}]}}
        assert parse_media_info(data) is None

    @pytest.mark.parametrize("data", [None, {}, {"media": None}])
    def test_empty(self, data) -> None:
        assert parse_media_info(data) is None

    def test_bad_numbers_default_to_zero(self) -> None:
        data = {"media": {"track": [{"@type": "Video", "Width": "wide", "Duration": "1.5"}]}}
        result = parse_media_info(data)
        assert result is not None
        assert result.width == 0
        assert result.run_time_seconds == 1.5


class TestVideoFileInfoReader:
    """Tests for VideoFileInfoReader."""

    def test_defaults_from_settings(self) -> None:
        reader = VideoFileInfoReader()
        assert reader.binary == "mediainfo"
        assert reader.timeout == 60
        assert reader.max_retries == 2

    def test_reads_media_info(self, reader: VideoFileInfoReader, video: Path) -> None:
        with patch("tvimport.media.mediainfo.subprocess.run") as mock_run:
            mock_run.return_value = completed(json.dumps(SAMPLE_OUTPUT))
            result = reader.get_media_info(video)

        assert result is not None
        assert result.width == 1920
        cmd = mock_run.call_args.args[0]
        assert cmd == ["mediainfo", "--Output=JSON", str(video)]
        assert mock_run.call_args.kwargs["timeout"] == 5

    def test_missing_file_returns_none(self, reader: VideoFileInfoReader, tmp_path: Path) -> None:
        with patch("tvimport.media.mediainfo.subprocess.run") as mock_run:
            assert reader.get_media_info(tmp_path / "gone.mkv") is None
        mock_run.assert_not_called()

    def test_retries_empty_output(self, reader: VideoFileInfoReader, video: Path) -> None:
        with patch("tvimport.media.mediainfo.subprocess.run") as mock_run:
            mock_run.side_effect = [completed(""), completed(json.dumps(SAMPLE_OUTPUT))]
            result = reader.get_media_info(video)

        assert result is not None
        assert mock_run.call_count == 2

    def test_retries_timeout_then_gives_up(
        self, reader: VideoFileInfoReader, video: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with patch("tvimport.media.mediainfo.subprocess.run") as mock_run:
            mock_run.side_effect = subprocess.TimeoutExpired(cmd="mediainfo", timeout=5)
            with caplog.at_level(logging.WARNING, logger="tvimport"):
                result = reader.get_media_info(video)

        assert result is None
        assert mock_run.call_count == 3
        assert "Unable to read media info" in caplog.text

    def test_missing_binary_not_retried(self, reader: VideoFileInfoReader, video: Path) -> None:
        with patch("tvimport.media.mediainfo.subprocess.run") as mock_run:
            mock_run.side_effect = FileNotFoundError("mediainfo")
            with pytest.raises(MediaInfoError, match="binary not found"):
                reader.run_mediainfo(video)
        assert mock_run.call_count == 1

    def test_failed_run_raises_with_details(self, reader: VideoFileInfoReader, video: Path) -> None:
        error = subprocess.CalledProcessError(1, ["mediainfo"], stderr="corrupt file")
        with patch("tvimport.media.mediainfo.subprocess.run", side_effect=error):
            with pytest.raises(MediaInfoError) as exc_info:
                reader.run_mediainfo(video)

        assert exc_info.value.return_code == 1
        assert exc_info.value.details["tool"] == "mediainfo"
        assert exc_info.value.details["stderr"] == "corrupt file"

    def test_invalid_json(self, reader: VideoFileInfoReader, video: Path) -> None:
        with patch("tvimport.media.mediainfo.subprocess.run", return_value=completed("not json")):
            with pytest.raises(MediaInfoError, match="not JSON"):
                reader.run_mediainfo(video)
            assert reader.get_media_info(video) is None

    def test_non_video_file(self, reader: VideoFileInfoReader, video: Path) -> None:
        audio_only = {"media": {"track": [{"@type": "Audio", "Format": "AAC"}]}}
        run = MagicMock(return_value=completed(json.dumps(audio_only)))
        with patch("tvimport.media.mediainfo.subprocess.run", run):
            assert reader.get_media_info(video) is None
