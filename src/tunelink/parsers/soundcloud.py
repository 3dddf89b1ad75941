"""
SoundCloud URL parser.

Classifies soundcloud.com links as tracks or playlists (sets), public or
private (secret token path segment), and strips tracking parameters.
"""

from __future__ import annotations

import logging
import re

from tunelink.exceptions import InvalidMusicUrlError
from tunelink.models import ContentType, MusicProvider, ParsedMusicUrl, UrlMetadata
from tunelink.parsers.base import BaseMusicUrlParser
from tunelink.parsing.urls import extract_query_params, normalize_url

logger = logging.getLogger(__name__)

_HOST = r"^https?://(?:www\.|m\.)?soundcloud\.com"
_SLUG = r"[^/?#]+"
_TOKEN = r"s-[A-Za-z0-9]+"
_TAIL = r"/?(?:[?#].*)?$"

# Ordered by specificity - first match wins. Playlist and private shapes
# overlap the looser track shapes, so they must be tried first.
SOUNDCLOUD_PATTERNS: list[dict] = [
    {
        "name": "playlist-private",
        "content_type": ContentType.PLAYLIST,
        "pattern": rf"{_HOST}/(?P<artist>{_SLUG})/sets/(?P<playlist>{_SLUG})/(?P<token>{_TOKEN}){_TAIL}",
    },
    {
        "name": "playlist-public",
        "content_type": ContentType.PLAYLIST,
        "pattern": rf"{_HOST}/(?P<artist>{_SLUG})/sets/(?P<playlist>{_SLUG}){_TAIL}",
    },
    {
        "name": "track-private",
        "content_type": ContentType.TRACK,
        "pattern": rf"{_HOST}/(?P<artist>{_SLUG})/(?P<track>{_SLUG})/(?P<token>{_TOKEN}){_TAIL}",
    },
    {
        "name": "track-public",
        "content_type": ContentType.TRACK,
        "pattern": rf"{_HOST}/(?P<artist>{_SLUG})/(?P<track>{_SLUG}){_TAIL}",
    },
]

_COMPILED_PATTERNS: list[tuple[dict, re.Pattern]] = [
    (entry, re.compile(entry["pattern"], re.IGNORECASE)) for entry in SOUNDCLOUD_PATTERNS
]


class SoundCloudParser(BaseMusicUrlParser):
    """Parser for soundcloud.com tracks and playlists, public and private.

    Example:
        >>> parser = SoundCloudParser()
        >>> result = parser.parse("https://soundcloud.com/art/sets/pl/s-TOK?si=1")
        >>> result.content_type, result.is_private, result.metadata.secret_token
        (<ContentType.PLAYLIST: 'playlist'>, True, 's-TOK')
        >>> result.sanitized_url
        'https://soundcloud.com/art/sets/pl/s-TOK'
    """

    provider = MusicProvider.SOUNDCLOUD
    display_name = "SoundCloud"
    domain = "soundcloud.com"

    def parse(self, url: str) -> ParsedMusicUrl:
        if not self.can_parse(url):
            raise InvalidMusicUrlError(url, f"Not a {self.display_name} URL")

        normalized = normalize_url(url)

        for entry, pattern in _COMPILED_PATTERNS:
            match = pattern.match(normalized)
            if match:
                break
        else:
            raise InvalidMusicUrlError(url, f"Invalid {self.display_name} URL format")

        groups = match.groupdict()
        content_type: ContentType = entry["content_type"]
        artist_slug = groups.get("artist")
        secret_token = groups.get("token")

        if content_type is ContentType.PLAYLIST:
            playlist_slug = groups.get("playlist")
            if not artist_slug or not playlist_slug:
                raise InvalidMusicUrlError(url, "Missing artist or playlist slug")
            metadata = UrlMetadata(
                artist_slug=artist_slug,
                playlist_slug=playlist_slug,
                secret_token=secret_token,
            )
        else:
            track_slug = groups.get("track")
            if not artist_slug or not track_slug:
                raise InvalidMusicUrlError(url, "Missing artist or track slug")
            metadata = UrlMetadata(
                artist_slug=artist_slug,
                track_slug=track_slug,
                secret_token=secret_token,
            )
            # "?in=artist/sets/playlist" only records where the track was
            # played from; the URL still identifies a single track
            playlist_context = extract_query_params(normalized).get("in")
            if playlist_context:
                logger.debug(f"Ignoring playlist context '{playlist_context}' on track URL")

        logger.debug(f"Matched SoundCloud pattern '{entry['name']}' for {url!r}")

        return ParsedMusicUrl(
            provider=self.provider,
            content_type=content_type,
            is_private=secret_token is not None,
            sanitized_url=self.sanitize(normalized),
            metadata=metadata,
            original_url=url,
        )
