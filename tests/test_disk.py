"""Tests for LocalDiskProvider and media extensions."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from tvimport.exceptions import FileMissingError
from tvimport.media.disk import LocalDiskProvider
from tvimport.media.extensions import MEDIA_FILE_EXTENSIONS, is_media_file


class TestLocalDiskProvider:
    """Tests for local filesystem queries."""

    def test_get_file_size(self, tmp_path: Path) -> None:
        video = tmp_path / "s01e01.mkv"
        video.write_bytes(b"x" * 2048)
        assert LocalDiskProvider().get_file_size(video) == 2048

    def test_get_file_size_accepts_str(self, tmp_path: Path) -> None:
        video = tmp_path / "s01e01.mkv"
        video.write_bytes(b"abc")
        assert LocalDiskProvider().get_file_size(str(video)) == 3

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        missing = tmp_path / "gone.mkv"
        with pytest.raises(FileMissingError) as exc_info:
            LocalDiskProvider().get_file_size(missing)
        assert exc_info.value.details["path"] == str(missing)

    def test_directory_is_not_a_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileMissingError):
            LocalDiskProvider().get_file_size(tmp_path)

    def test_file_exists(self, tmp_path: Path) -> None:
        video = tmp_path / "s01e01.mkv"
        video.touch()
        provider = LocalDiskProvider()
        assert provider.file_exists(video) is True
        assert provider.file_exists(tmp_path / "other.mkv") is False

    def test_available_space(self, tmp_path: Path) -> None:
        free = LocalDiskProvider().get_available_space(tmp_path)
        assert free is not None
        assert free > 0

    def test_available_space_walks_up_to_existing_parent(self, tmp_path: Path) -> None:
        provider = LocalDiskProvider()
        nested = tmp_path / "Series Title" / "Season 01"
        assert provider.get_available_space(nested) is not None

    def test_available_space_error_returns_none(self, tmp_path: Path) -> None:
        with patch("tvimport.media.disk.shutil.disk_usage", side_effect=OSError("nope")):
            assert LocalDiskProvider().get_available_space(tmp_path) is None


class TestIsMediaFile:
    """Tests for is_media_file()."""

    @pytest.mark.parametrize("name", ["show.mkv", "SHOW.MKV", "show.m2ts", "show.avi", "show.mp4"])
    def test_media(self, name: str) -> None:
        assert is_media_file(name) is True

    @pytest.mark.parametrize("name", ["show.nfo", "show.srt", "show", "show.mkv.part"])
    def test_not_media(self, name: str) -> None:
        assert is_media_file(name) is False

    def test_extra_extensions(self) -> None:
        assert is_media_file("show.xyz", extra=[".XYZ"]) is True

    def test_extensions_are_lowercase(self) -> None:
        assert all(ext == ext.lower() and ext.startswith(".") for ext in MEDIA_FILE_EXTENSIONS)
