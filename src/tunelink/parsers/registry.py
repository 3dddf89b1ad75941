"""
tunelink.parsers.registry - Parser registration and URL dispatch.

The registry holds one parser per music provider and routes each URL to the
first registered parser that claims it. It is an explicitly constructed
object: build it once at startup (see ``tunelink.parsers.create_registry``)
and pass it to whatever needs URL resolution.

Example:
    >>> from tunelink.parsers import MusicUrlParserRegistry, SoundCloudParser
    >>> registry = MusicUrlParserRegistry()
    >>> registry.register(SoundCloudParser())
    >>> registry.parse("soundcloud.com/artist/track?si=abc").sanitized_url
    'https://soundcloud.com/artist/track'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from tunelink.exceptions import InvalidMusicUrlError
from tunelink.parsers.base import MusicUrlParser

if TYPE_CHECKING:
    from tunelink.models import MusicProvider, ParsedMusicUrl

logger = logging.getLogger(__name__)


def _provider_key(provider: MusicProvider | str) -> str:
    """Normalize a provider enum or string to its string key."""
    return getattr(provider, "value", provider)


class MusicUrlParserRegistry:
    """Ordered set of provider parsers with first-match dispatch.

    Registration is expected to happen during single-threaded startup;
    ``parse`` and ``sanitize`` only read the parser list afterwards.
    """

    def __init__(self, parsers: Iterable[MusicUrlParser] | None = None):
        self._parsers: list[MusicUrlParser] = []
        if parsers is not None:
            self.register_many(parsers)

    def register(self, parser: MusicUrlParser) -> None:
        """Register a parser. A second parser for the same provider is ignored.

        Raises:
            TypeError: If ``parser`` does not implement the MusicUrlParser protocol.
        """
        if not isinstance(parser, MusicUrlParser):
            raise TypeError(
                f"Cannot register {type(parser).__name__}: parsers must define "
                "provider, can_parse(), parse() and sanitize()"
            )

        key = _provider_key(parser.provider)
        if key in self:
            logger.warning(f"Parser for provider '{key}' is already registered")
            return

        self._parsers.append(parser)
        logger.debug(f"Registered parser: {key} ({type(parser).__name__})")

    def register_many(self, parsers: Iterable[MusicUrlParser]) -> None:
        """Register several parsers in order."""
        for parser in parsers:
            self.register(parser)

    def find_parser(self, url: object) -> MusicUrlParser | None:
        """Return the first parser that claims the URL, or None."""
        for parser in self._parsers:
            if parser.can_parse(url):
                return parser
        return None

    def can_parse(self, url: object) -> bool:
        """Check whether any registered parser claims the URL. Never raises."""
        return self.find_parser(url) is not None

    def _dispatch(self, url: object) -> MusicUrlParser:
        if not isinstance(url, str) or not url.strip():
            raise InvalidMusicUrlError(url, "URL cannot be empty")

        parser = self.find_parser(url)
        if parser is None:
            raise InvalidMusicUrlError(
                url,
                "No parser available for this URL. Supported providers: "
                + ", ".join(self.providers),
            )
        return parser

    def parse(self, url: str) -> ParsedMusicUrl:
        """Parse a URL with the matching provider parser.

        Raises:
            InvalidMusicUrlError: If the URL is empty, no parser claims it, or
                the matching parser rejects it.
        """
        parser = self._dispatch(url)
        logger.debug(f"Dispatching {url!r} to {_provider_key(parser.provider)} parser")
        return parser.parse(url)

    def sanitize(self, url: str) -> str:
        """Sanitize a URL with the matching provider parser.

        Raises:
            InvalidMusicUrlError: If the URL is empty or no parser claims it.
        """
        return self._dispatch(url).sanitize(url)

    def get_parsers(self) -> list[MusicUrlParser]:
        """Return a copy of the registered parsers, in registration order."""
        return list(self._parsers)

    def get_parser(self, provider: MusicProvider | str) -> MusicUrlParser | None:
        """Look up a parser by provider key."""
        key = _provider_key(provider)
        for parser in self._parsers:
            if _provider_key(parser.provider) == key:
                return parser
        return None

    @property
    def providers(self) -> list[str]:
        """Registered provider keys, in registration order."""
        return [_provider_key(p.provider) for p in self._parsers]

    def clear(self) -> None:
        """Remove all registered parsers."""
        self._parsers = []
        logger.debug("Parser registry cleared")

    def __len__(self) -> int:
        return len(self._parsers)

    def __contains__(self, provider: object) -> bool:
        if not isinstance(provider, str):
            return False
        return self.get_parser(provider) is not None

    def __repr__(self) -> str:
        return f"MusicUrlParserRegistry(providers={self.providers!r})"
