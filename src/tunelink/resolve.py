"""
URL resolution service.

Parses a user-supplied URL, fetches track or playlist metadata for the
sanitized URL, and shapes the result (or the error) the way the HTTP resolve
endpoint returns it. The metadata fetcher is injected: tunelink does not
talk to SoundCloud itself.

Example:
    >>> resolver = UrlResolver(create_registry(), fetch_metadata=scraper.get_info)
    >>> status, body = resolver.handle({"url": "soundcloud.com/art/trk?si=1"})
    >>> status, body["type"], body["sanitizedUrl"]
    (200, 'track', 'https://soundcloud.com/art/trk')
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from tunelink.exceptions import InvalidMusicUrlError, MetadataError, TunelinkError
from tunelink.models import ContentType, MusicProvider, ParsedMusicUrl
from tunelink.parsers.registry import MusicUrlParserRegistry

logger = logging.getLogger(__name__)

MetadataFetcher = Callable[[str], Any]


class ResolveUrlRequest(BaseModel):
    """Body of a resolve request."""

    url: str | None = None
    provider: MusicProvider | None = Field(
        None, description="Force a specific provider parser"
    )


class ResolveUrlResponse(BaseModel):
    """Parsed URL plus the metadata fetched for it."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    provider: MusicProvider
    type: ContentType
    is_private: bool
    sanitized_url: str
    data: Any = Field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class UrlResolver:
    """Resolve URLs against a parser registry and a metadata fetcher.

    Args:
        registry: Registry used to classify and sanitize URLs.
        fetch_metadata: Callable taking a sanitized URL and returning the
            provider's track/playlist metadata. The value is forwarded
            unchanged and must be JSON serializable.
    """

    def __init__(self, registry: MusicUrlParserRegistry, fetch_metadata: MetadataFetcher):
        self.registry = registry
        self.fetch_metadata = fetch_metadata

    def _parse(self, request: ResolveUrlRequest) -> ParsedMusicUrl:
        url = request.url
        if not url or not url.strip():
            raise InvalidMusicUrlError(url, "URL is required")

        if request.provider is None:
            return self.registry.parse(url)

        parser = self.registry.get_parser(request.provider)
        if parser is None:
            raise InvalidMusicUrlError(
                url, f"Provider '{request.provider.value}' is not registered"
            )
        return parser.parse(url)

    def resolve(self, request: ResolveUrlRequest | str) -> ResolveUrlResponse:
        """Parse the URL and fetch its metadata.

        Raises:
            InvalidMusicUrlError: If the URL is missing or cannot be parsed.
            MetadataError: If the metadata fetcher fails.
        """
        if isinstance(request, str):
            request = ResolveUrlRequest(url=request)

        parsed = self._parse(request)
        logger.info(
            f"Resolving {parsed.provider.value} {parsed.content_type.value}: "
            f"{parsed.sanitized_url}"
        )

        try:
            data = self.fetch_metadata(parsed.sanitized_url)
        except TunelinkError:
            raise
        except Exception as e:
            raise MetadataError(
                f"Failed to fetch metadata: {e}", url=parsed.sanitized_url
            ) from e

        return ResolveUrlResponse(
            provider=parsed.provider,
            type=parsed.content_type,
            is_private=parsed.is_private,
            sanitized_url=parsed.sanitized_url,
            data=data if data is not None else {},
        )

    def handle(self, payload: dict[str, Any] | None) -> tuple[int, dict[str, Any]]:
        """Resolve a request body and return ``(status_code, body)``.

        Client mistakes map to 400, fetcher failures to 502.
        """
        payload = payload or {}
        if not payload.get("url"):
            return 400, {"message": "URL is required", "code": "MISSING_URL"}

        try:
            request = ResolveUrlRequest.model_validate(payload)
        except ValueError as e:
            return 400, {"message": str(e), "code": "INVALID_REQUEST"}

        try:
            response = self.resolve(request)
        except InvalidMusicUrlError as e:
            logger.info(f"Rejected URL {e.url!r}: {e.reason}")
            return 400, e.to_dict()
        except MetadataError as e:
            logger.error(f"Error resolving URL: {e}")
            return 502, e.to_dict()

        try:
            return 200, response.to_dict()
        except ValueError as e:
            error = MetadataError(
                f"Metadata is not JSON serializable: {e}", url=response.sanitized_url
            )
            logger.error(f"Error resolving URL: {error}")
            return 502, error.to_dict()
