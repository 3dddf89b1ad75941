"""
Unified configuration loader with priority resolution.

Root directory (TUNELINK_ROOT):
- macOS/Linux: ~/.tunelink
- Windows: %APPDATA%\\tunelink
- Override: TUNELINK_ROOT environment variable

Parser settings priority (highest to lowest), resolved per key:
1. Environment variables (TUNELINK_PROVIDERS, TUNELINK_STRICT_HOST)
2. Project config (.tunelink/config.yaml)
3. User config ({root_dir}/config.yaml)
4. Defaults (config/defaults.py)

A config file that fails to parse is skipped with a warning.

YAML structure:
    parsers:
      enabled: [soundcloud]
      strict_host: true
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from tunelink.config.defaults import (
    CONFIG_FILENAME,
    DEFAULT_ENABLED_PROVIDERS,
    DEFAULT_STRICT_HOST,
)
from tunelink.exceptions import ConfigError

logger = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class ConfigSource(Enum):
    """Source of the configuration value."""

    ENV = "env"
    PROJECT = "project"
    USER = "user"
    DEFAULT = "default"


@dataclass(frozen=True)
class TunelinkConfig:
    """Resolved tunelink configuration."""

    root_dir: Path
    enabled_providers: tuple[str, ...] = DEFAULT_ENABLED_PROVIDERS
    strict_host: bool = DEFAULT_STRICT_HOST
    source: ConfigSource = ConfigSource.DEFAULT
    config_path: Path | None = None

    def __repr__(self) -> str:
        return (
            f"TunelinkConfig(root_dir={self.root_dir!r}, "
            f"enabled_providers={self.enabled_providers!r}, "
            f"strict_host={self.strict_host!r}, source={self.source.value!r})"
        )


def _load_yaml_config(config_path: Path) -> dict[str, Any] | None:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Parsed config dict, or None if file doesn't exist or fails to parse.
    """
    if not config_path.exists():
        return None

    try:
        with open(config_path) as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}")
        return None

    if config is None:
        return {}
    if not isinstance(config, dict):
        logger.warning(f"Config file {config_path} is not a valid YAML dict")
        return None
    return config


def _get_parsers_section(config: dict[str, Any] | None) -> dict[str, Any]:
    """Return the 'parsers' mapping of a config dict, or {} if absent/invalid."""
    if not config:
        return {}
    section = config.get("parsers")
    if not isinstance(section, dict):
        return {}
    return section


def _find_project_config() -> Path | None:
    """Find project-level config by walking up from cwd.

    Returns:
        Path to .tunelink/config.yaml if found, None otherwise.
    """
    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        config_path = parent / ".tunelink" / CONFIG_FILENAME
        if config_path.exists():
            return config_path
    return None


def _get_root_dir() -> Path:
    """Get the tunelink root directory.

    Priority:
    1. TUNELINK_ROOT environment variable
    2. Platform-specific default:
       - Windows: %APPDATA%\\tunelink
       - macOS/Linux: ~/.tunelink

    Returns:
        Path to the root directory (may not exist yet).
    """
    env_root = os.environ.get("TUNELINK_ROOT")
    if env_root:
        return Path(env_root).expanduser().resolve()

    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / "tunelink"
        return Path.home() / "AppData" / "Roaming" / "tunelink"
    return Path.home() / ".tunelink"


def _get_user_config_path() -> Path:
    """Get the user-level config path ({root_dir}/config.yaml)."""
    return _get_root_dir() / CONFIG_FILENAME


def _parse_bool(value: str, name: str) -> bool:
    """Parse a boolean environment variable.

    Raises:
        ConfigError: If the value is not a recognised boolean string.
    """
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(
        f"{name} must be one of {', '.join(sorted(_TRUE_VALUES | _FALSE_VALUES))}, "
        f"got {value!r}"
    )


def _parse_provider_list(value: Any) -> tuple[str, ...] | None:
    """Turn a YAML list or comma-separated string into provider keys."""
    if value is None:
        return None
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, list):
        items = [str(item) for item in value]
    else:
        return None
    return tuple(item.strip().lower() for item in items if item.strip())


def _find_config_files() -> list[tuple[Path, ConfigSource]]:
    """List existing config files in priority order, project config first."""
    files = []
    project_path = _find_project_config()
    if project_path:
        files.append((project_path, ConfigSource.PROJECT))

    user_path = _get_user_config_path()
    if user_path.exists():
        files.append((user_path, ConfigSource.USER))

    return files


def _resolve_config() -> TunelinkConfig:
    """Resolve configuration from all sources in priority order.

    Each key is taken from the first config file that sets it with the right
    type, so a project file that only sets ``enabled`` still picks up
    ``strict_host`` from the user config. Environment variables override
    whatever the files supplied.

    Returns:
        Resolved TunelinkConfig. ``source`` names the highest-priority source
        that contributed a value and ``config_path`` the highest-priority file
        that did (None when no file supplied anything).

    Raises:
        ConfigError: If an environment override has an invalid value.
    """
    root_dir = _get_root_dir()
    enabled: tuple[str, ...] | None = None
    strict_host: bool | None = None
    source = ConfigSource.DEFAULT
    config_path = None

    for path, file_source in _find_config_files():
        section = _get_parsers_section(_load_yaml_config(path))
        supplied = False

        file_enabled = _parse_provider_list(section.get("enabled"))
        if enabled is None and file_enabled is not None:
            enabled = file_enabled
            supplied = True

        file_strict = section.get("strict_host")
        if strict_host is None and isinstance(file_strict, bool):
            strict_host = file_strict
            supplied = True

        if supplied:
            logger.info(f"Using parser settings from {file_source.value} config {path}")
            if config_path is None:
                source = file_source
                config_path = path

    if enabled is None:
        enabled = DEFAULT_ENABLED_PROVIDERS
    if strict_host is None:
        strict_host = DEFAULT_STRICT_HOST

    env_providers = os.environ.get("TUNELINK_PROVIDERS")
    if env_providers:
        enabled = _parse_provider_list(env_providers) or ()
        source = ConfigSource.ENV
        logger.info(f"Using providers from TUNELINK_PROVIDERS: {', '.join(enabled)}")

    env_strict = os.environ.get("TUNELINK_STRICT_HOST")
    if env_strict:
        strict_host = _parse_bool(env_strict, "TUNELINK_STRICT_HOST")
        source = ConfigSource.ENV

    if source is ConfigSource.DEFAULT:
        logger.debug("Using default parser settings")

    return TunelinkConfig(
        root_dir=root_dir,
        enabled_providers=enabled,
        strict_host=strict_host,
        source=source,
        config_path=config_path,
    )


@lru_cache(maxsize=1)
def get_config() -> TunelinkConfig:
    """Get resolved tunelink configuration.

    Results are cached - configuration is resolved once per process.
    To force re-resolution (e.g., after env change), use clear_config_cache().
    """
    return _resolve_config()


def clear_config_cache() -> None:
    """Clear the cached configuration.

    Call this if environment variables or config files have changed
    and you need to re-resolve the configuration.
    """
    get_config.cache_clear()
