"""
ParsedMusicUrl Pydantic model for classified, sanitized music URLs.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class MusicProvider(str, Enum):
    """Music platforms with their own URL scheme."""

    SOUNDCLOUD = "soundcloud"
    SPOTIFY = "spotify"
    YOUTUBE = "youtube"
    APPLE_MUSIC = "apple-music"

    def __str__(self) -> str:
        return self.value


class ContentType(str, Enum):
    """Kind of content a URL points at."""

    TRACK = "track"
    PLAYLIST = "playlist"
    ALBUM = "album"
    ARTIST = "artist"

    def __str__(self) -> str:
        return self.value


# camelCase on the wire, snake_case in Python; both accepted on input
_MODEL_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


class UrlMetadata(BaseModel):
    """Provider-specific identifiers extracted from the URL path."""

    model_config = _MODEL_CONFIG

    artist_slug: str | None = None
    track_slug: str | None = None
    playlist_slug: str | None = None
    album_slug: str | None = None
    secret_token: str | None = Field(
        None, description="Access token for private/unlisted content (e.g. 's-AbC12')"
    )


class ParsedMusicUrl(BaseModel):
    """Result of a successful parse. Immutable, created fresh per call."""

    model_config = _MODEL_CONFIG

    provider: MusicProvider = Field(..., description="Provider of the parser that matched")
    content_type: ContentType
    is_private: bool
    sanitized_url: str = Field(..., description="https URL without query string")
    metadata: UrlMetadata = Field(default_factory=UrlMetadata)
    original_url: str = Field(..., description="Input string, verbatim")

    @model_validator(mode="after")
    def check_invariants(self) -> ParsedMusicUrl:
        """Reject results that would be partially populated or inconsistent."""
        if "?" in self.sanitized_url:
            raise ValueError("sanitized_url must not contain a query string")

        has_token = bool(self.metadata.secret_token)
        if self.is_private != has_token:
            raise ValueError("is_private must be set iff a secret token is present")

        meta = self.metadata
        if self.content_type is ContentType.TRACK and not (
            meta.artist_slug and meta.track_slug
        ):
            raise ValueError("track URLs require artist_slug and track_slug")
        if self.content_type is ContentType.PLAYLIST and not (
            meta.artist_slug and meta.playlist_slug
        ):
            raise ValueError("playlist URLs require artist_slug and playlist_slug")
        return self

    def to_dict(self) -> dict:
        """Serialize with camelCase keys, omitting absent metadata fields."""
        data = self.model_dump(mode="json", by_alias=True)
        data["metadata"] = {k: v for k, v in data["metadata"].items() if v is not None}
        return data

    def __str__(self) -> str:
        return f"{self.provider.value}:{self.content_type.value}:{self.sanitized_url}"

    def __repr__(self) -> str:
        return (
            f"ParsedMusicUrl(provider={self.provider.value!r}, "
            f"content_type={self.content_type.value!r}, "
            f"is_private={self.is_private!r}, sanitized_url={self.sanitized_url!r})"
        )
