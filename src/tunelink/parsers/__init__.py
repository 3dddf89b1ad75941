"""
Music URL parsers.

Provider parsers, the registry that dispatches between them, and a helper
that builds a registry from configuration.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tunelink.exceptions import ConfigError
from tunelink.models import MusicProvider
from tunelink.parsers.base import BaseMusicUrlParser, MusicUrlParser
from tunelink.parsers.registry import MusicUrlParserRegistry
from tunelink.parsers.soundcloud import SOUNDCLOUD_PATTERNS, SoundCloudParser

if TYPE_CHECKING:
    from tunelink.config.loader import TunelinkConfig

logger = logging.getLogger(__name__)

# Provider -> parser implementation. Providers missing here (Spotify,
# YouTube, Apple Music) are known keys without a parser yet.
PARSER_CLASSES: dict[MusicProvider, type[BaseMusicUrlParser]] = {
    MusicProvider.SOUNDCLOUD: SoundCloudParser,
}


def create_registry(config: TunelinkConfig | None = None) -> MusicUrlParserRegistry:
    """Build a registry with the parsers enabled in the configuration.

    Args:
        config: Resolved configuration. Defaults to ``get_config()``.

    Returns:
        MusicUrlParserRegistry with one parser per enabled, implemented
        provider, in configured order.

    Raises:
        ConfigError: If the configuration names an unknown provider.
    """
    if config is None:
        from tunelink.config.loader import get_config

        config = get_config()

    registry = MusicUrlParserRegistry()
    for name in config.enabled_providers:
        try:
            provider = MusicProvider(name)
        except ValueError as e:
            known = ", ".join(p.value for p in MusicProvider)
            raise ConfigError(
                f"Unknown provider '{name}'. Known providers: {known}"
            ) from e

        parser_class = PARSER_CLASSES.get(provider)
        if parser_class is None:
            logger.warning(f"No parser implementation for provider '{name}', skipping")
            continue

        registry.register(parser_class(strict_host=config.strict_host))

    return registry


__all__ = [
    "MusicUrlParser",
    "BaseMusicUrlParser",
    "MusicUrlParserRegistry",
    "SoundCloudParser",
    "SOUNDCLOUD_PATTERNS",
    "PARSER_CLASSES",
    "create_registry",
]
