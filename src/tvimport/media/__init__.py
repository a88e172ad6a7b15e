"""
Media file helpers: extensions, local disk queries and MediaInfo reading.
"""

from __future__ import annotations

from .disk import LocalDiskProvider
from .extensions import MEDIA_FILE_EXTENSIONS, is_media_file
from .mediainfo import MediaInfoModel, VideoFileInfoReader, parse_media_info

__all__ = [
    "MEDIA_FILE_EXTENSIONS",
    "LocalDiskProvider",
    "MediaInfoModel",
    "VideoFileInfoReader",
    "is_media_file",
    "parse_media_info",
]
