"""
Configuration for tunelink.

Contains defaults, the YAML/env config loader, and config validation.
"""

from tunelink.config.defaults import (
    CONFIG_FILENAME,
    DEFAULT_ENABLED_PROVIDERS,
    DEFAULT_STRICT_HOST,
)
from tunelink.config.loader import (
    ConfigSource,
    TunelinkConfig,
    clear_config_cache,
    get_config,
)
from tunelink.config.validation import ConfigValidationResult, validate_config

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_ENABLED_PROVIDERS",
    "DEFAULT_STRICT_HOST",
    # Config loader
    "ConfigSource",
    "TunelinkConfig",
    "get_config",
    "clear_config_cache",
    # Validation
    "ConfigValidationResult",
    "validate_config",
]
