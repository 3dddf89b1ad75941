"""
Data models for tunelink.

Provides the Pydantic models and enums describing a parsed music URL.
"""

from tunelink.models.music_url import (
    ContentType,
    MusicProvider,
    ParsedMusicUrl,
    UrlMetadata,
)

__all__ = [
    "ContentType",
    "MusicProvider",
    "ParsedMusicUrl",
    "UrlMetadata",
]
