"""
tunelink - Classify and sanitize music links.

Turns a pasted SoundCloud link into a structured result:
1. Detect the provider and whether the link is a track or a playlist
2. Detect private links (secret token) and extract artist/track/playlist slugs
3. Strip tracking parameters to get a stable https URL for metadata lookups
"""

# Config
from tunelink.config import (
    ConfigSource,
    TunelinkConfig,
    clear_config_cache,
    get_config,
    validate_config,
)

# Exceptions
from tunelink.exceptions import (
    ConfigError,
    InvalidMusicUrlError,
    MetadataError,
    TunelinkError,
)

# Models
from tunelink.models import ContentType, MusicProvider, ParsedMusicUrl, UrlMetadata

# Parsers
from tunelink.parsers import (
    PARSER_CLASSES,
    BaseMusicUrlParser,
    MusicUrlParser,
    MusicUrlParserRegistry,
    SoundCloudParser,
    create_registry,
)

# Resolve service
from tunelink.resolve import ResolveUrlRequest, ResolveUrlResponse, UrlResolver

__version__ = "0.1.0"

__all__ = [
    # Config
    "ConfigSource",
    "TunelinkConfig",
    "clear_config_cache",
    "get_config",
    "validate_config",
    # Exceptions
    "ConfigError",
    "InvalidMusicUrlError",
    "MetadataError",
    "TunelinkError",
    # Models
    "ContentType",
    "MusicProvider",
    "ParsedMusicUrl",
    "UrlMetadata",
    # Parsers
    "PARSER_CLASSES",
    "BaseMusicUrlParser",
    "MusicUrlParser",
    "MusicUrlParserRegistry",
    "SoundCloudParser",
    "create_registry",
    # Resolve
    "ResolveUrlRequest",
    "ResolveUrlResponse",
    "UrlResolver",
]
