"""Shared pytest fixtures, builders and in-memory collaborators for tvimport tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path

import pytest

from tvimport.config import clear_settings
from tvimport.env_settings import clear_env_settings_cache
from tvimport.exceptions import FileMissingError
from tvimport.importing.interfaces import DetectSampleResult
from tvimport.media.mediainfo import MediaInfoModel
from tvimport.parser.models import LocalEpisode, ParsedEpisodeInfo
from tvimport.qualities import Quality, QualityDetectionSource, QualityModel, Revision
from tvimport.tv.models import Episode, Series

SERIES_PATH = Path("/tv/Series Title")


# =============================================================================
# Builders
# =============================================================================


def make_quality(
    quality: Quality = Quality.HDTV_720P,
    detection_source: QualityDetectionSource = QualityDetectionSource.NAME,
    version: int = 1,
    real: int = 0,
) -> QualityModel:
    """Create a QualityModel parsed from a release name by default."""
    return QualityModel(
        quality=quality,
        revision=Revision(real=real, version=version),
        detection_source=detection_source,
    )


def make_series(**kwargs) -> Series:
    """Create a Series with sensible defaults."""
    kwargs.setdefault("id", 1)
    kwargs.setdefault("title", "Series Title")
    kwargs.setdefault("path", SERIES_PATH)
    return Series(**kwargs)


def make_parsed_info(**kwargs) -> ParsedEpisodeInfo:
    """Create ParsedEpisodeInfo for S01E01 HDTV-720p by default."""
    kwargs.setdefault("series_title", "Series Title")
    kwargs.setdefault("season_number", 1)
    kwargs.setdefault("episode_numbers", (1,))
    kwargs.setdefault("quality", make_quality())
    return ParsedEpisodeInfo(**kwargs)


def make_local_episode(**kwargs) -> LocalEpisode:
    """Create a LocalEpisode for a file inside a download folder."""
    kwargs.setdefault("path", Path("/downloads/Series.Title.S01E01/s01e01.mkv"))
    kwargs.setdefault("series", make_series())
    return LocalEpisode(**kwargs)


def make_media_info(width: int = 1280, height: int = 720) -> MediaInfoModel:
    return MediaInfoModel(width=width, height=height, video_codec="AVC")


# =============================================================================
# In-memory collaborators
# =============================================================================


class FakeTitleParser:
    """TitleParser backed by lookup tables; unknown input parses to None."""

    def __init__(
        self,
        titles: dict[str, ParsedEpisodeInfo] | None = None,
        paths: dict[str, ParsedEpisodeInfo] | None = None,
    ) -> None:
        self.titles = titles or {}
        self.paths = paths or {}

    def parse_title(self, title: str) -> ParsedEpisodeInfo | None:
        return self.titles.get(title)

    def parse_path(self, path: Path | str) -> ParsedEpisodeInfo | None:
        return self.paths.get(str(path))


class FakeParsingService:
    """ParsingService returning canned episodes and recording lookups."""

    def __init__(
        self,
        episodes: Sequence[Episode] | None = None,
        specials: dict[str, ParsedEpisodeInfo] | None = None,
    ) -> None:
        self.episodes = list(episodes) if episodes is not None else [Episode(1, 1, 1)]
        self.specials = specials or {}
        self.lookups: list[ParsedEpisodeInfo] = []
        self.special_lookups: list[str] = []

    def get_episodes(
        self,
        parsed_episode_info: ParsedEpisodeInfo,
        series: Series,
        scene_source: bool,
    ) -> list[Episode]:
        self.lookups.append(parsed_episode_info)
        return list(self.episodes)

    def parse_special_episode_title(self, title: str, series: Series) -> ParsedEpisodeInfo | None:
        self.special_lookups.append(title)
        return self.specials.get(title)


class FakeDiskProvider:
    """DiskProvider over a dict of file sizes."""

    def __init__(
        self,
        sizes: dict[str, int] | None = None,
        free_space: int | None = 100 * 1024**3,
        default_size: int = 1024**3,
        missing: set[str] | None = None,
    ) -> None:
        self.sizes = sizes or {}
        self.free_space = free_space
        self.default_size = default_size
        self.missing = missing or set()

    def get_file_size(self, path: Path | str) -> int:
        if str(path) in self.missing:
            raise FileMissingError(f"File not found: {path}", path=path)
        return self.sizes.get(str(path), self.default_size)

    def file_exists(self, path: Path | str) -> bool:
        return str(path) not in self.missing

    def get_available_space(self, path: Path | str) -> int | None:
        return self.free_space


class FakeMediaInfoReader:
    """MediaInfoReader returning the same model for every path."""

    def __init__(self, media_info: MediaInfoModel | None = None) -> None:
        self.media_info = media_info

    def get_media_info(self, path: Path | str) -> MediaInfoModel | None:
        return self.media_info


class FakeMediaFileService:
    """MediaFileService that treats ``existing`` paths as already imported."""

    def __init__(self, existing: set[str] | None = None) -> None:
        self.existing = existing or set()

    def filter_existing_files(self, paths: Sequence[str], series: Series) -> list[str]:
        return [p for p in paths if p not in self.existing]


class FakeSampleDetector:
    """SampleDetector with per-path results, NOT_SAMPLE by default."""

    def __init__(self, results: dict[str, DetectSampleResult] | None = None) -> None:
        self.results = results or {}
        self.calls: list[tuple[str, bool]] = []

    def is_sample(self, series: Series, path: Path | str, is_special: bool) -> DetectSampleResult:
        self.calls.append((str(path), is_special))
        return self.results.get(str(path), DetectSampleResult.NOT_SAMPLE)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Keep config and environment state from leaking between tests."""
    for var in ("TVIMPORT_LOG_LEVEL", "TVIMPORT_CONFIG_FILE", "TVIMPORT_MEDIAINFO_BINARY"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    clear_env_settings_cache()
    clear_settings()
    yield
    clear_env_settings_cache()
    clear_settings()


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Undo setup_logging() side effects on the package logger."""
    yield
    logger = logging.getLogger("tvimport")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
