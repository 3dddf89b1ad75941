"""
tunelink.parsers.base - Parser protocol and shared base class.

This module defines the contract every music provider parser must satisfy.
The registry only relies on the MusicUrlParser protocol, so new providers
can be added without touching dispatch code.

Protocols:
    MusicUrlParser: Capability set {provider, can_parse, parse, sanitize}.

Classes:
    BaseMusicUrlParser: Abstract base with normalization, host checking and
        sanitization shared by concrete parsers.

Example:
    >>> from tunelink.parsers.base import BaseMusicUrlParser
    >>> class SpotifyParser(BaseMusicUrlParser):
    ...     provider = MusicProvider.SPOTIFY
    ...     display_name = "Spotify"
    ...     domain = "spotify.com"
    ...     def parse(self, url):
    ...         ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

from tunelink.parsing.urls import (
    force_https,
    get_host,
    host_matches,
    normalize_url,
    strip_query,
)

if TYPE_CHECKING:
    from tunelink.models import MusicProvider, ParsedMusicUrl


@runtime_checkable
class MusicUrlParser(Protocol):
    """Protocol for provider URL parsers.

    Implemented by:
    - SoundCloudParser: soundcloud.com tracks and playlists

    Example:
        >>> parser: MusicUrlParser = SoundCloudParser()
        >>> if parser.can_parse(url):
        ...     result = parser.parse(url)
    """

    provider: MusicProvider

    def can_parse(self, url: object) -> bool:
        """Return True if this parser owns the URL. Must never raise."""
        ...

    def parse(self, url: str) -> ParsedMusicUrl:
        """Classify the URL.

        Raises:
            InvalidMusicUrlError: If the URL is not valid for this provider.
        """
        ...

    def sanitize(self, url: str) -> str:
        """Return the canonical https URL without query parameters."""
        ...


class BaseMusicUrlParser(ABC):
    """Abstract base class for provider parsers.

    Subclasses set ``provider``, ``display_name`` and ``domain`` and
    implement ``parse``. Host checking and sanitization are shared.

    Attributes:
        strict_host: When True (default), ``can_parse`` requires the URL's
            host to be ``domain`` or a subdomain of it. When False, any URL
            containing ``domain`` anywhere is accepted.
    """

    provider: ClassVar[MusicProvider]
    display_name: ClassVar[str]
    domain: ClassVar[str]

    def __init__(self, *, strict_host: bool = True):
        self.strict_host = strict_host

    def can_parse(self, url: object) -> bool:
        if not isinstance(url, str) or not url.strip():
            return False

        if self.strict_host:
            return host_matches(get_host(url), self.domain)
        return self.domain in normalize_url(url).lower()

    @abstractmethod
    def parse(self, url: str) -> ParsedMusicUrl:
        """Parse the URL into a ParsedMusicUrl.

        Raises:
            InvalidMusicUrlError: If the URL cannot be classified.
        """
        ...

    def sanitize(self, url: str) -> str:
        """Normalize the scheme to https and drop query string and fragment.

        Example:
            >>> SoundCloudParser().sanitize("soundcloud.com/a/b/?si=1")
            'https://soundcloud.com/a/b'
        """
        cleaned = strip_query(force_https(normalize_url(url)))
        # "https://host/" keeps its root slash; trailing slashes after a path go
        path_start = cleaned.find("/", len("https://"))
        if path_start != -1:
            cleaned = cleaned[:path_start] + (cleaned[path_start:].rstrip("/") or "/")
        return cleaned

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(strict_host={self.strict_host!r})"
