"""
Validation of the parser section of a tunelink config file.

Used by ``tunelink validate-config`` to report problems before they surface
as a silently empty registry.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from tunelink.config.loader import _parse_provider_list
from tunelink.models import MusicProvider

_VALID_PARSERS_KEYS = frozenset({"enabled", "strict_host"})


@dataclass
class ConfigValidationResult:
    """Result of validating a config dict.

    Attributes:
        errors: Fatal issues that prevent correct operation.
        warnings: Non-fatal issues that may cause unexpected behavior.
    """

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True if no errors were found."""
        return len(self.errors) == 0


def validate_config(config_dict: dict | None = None) -> ConfigValidationResult:
    """Validate a parsed config dict.

    Checks for:
    - Structural issues (wrong types)
    - Unknown keys in the parsers section
    - Unknown provider keys in ``enabled``
    - Providers that are known but have no parser implementation yet

    Args:
        config_dict: Parsed YAML config dict (the full config, not just the
            parsers section).

    Returns:
        ConfigValidationResult with errors and warnings.
    """
    from tunelink.parsers import PARSER_CLASSES

    result = ConfigValidationResult()

    if config_dict is None:
        return result

    if not isinstance(config_dict, dict):
        result.errors.append(
            f"Config must be a YAML mapping (dict), got {type(config_dict).__name__}"
        )
        return result

    section = config_dict.get("parsers")
    if section is None:
        return result

    if not isinstance(section, dict):
        result.errors.append(
            "The 'parsers' section must be a mapping (dict), "
            f"got {type(section).__name__}"
        )
        return result

    for key in section:
        if key not in _VALID_PARSERS_KEYS:
            result.warnings.append(
                f"Unknown key '{key}' in parsers section. "
                f"Valid keys: {', '.join(sorted(_VALID_PARSERS_KEYS))}"
            )

    strict_host = section.get("strict_host")
    if strict_host is not None and not isinstance(strict_host, bool):
        result.errors.append(
            f"'parsers.strict_host' must be true or false, got {strict_host!r}"
        )

    raw_enabled = section.get("enabled")
    if raw_enabled is None:
        return result

    enabled = _parse_provider_list(raw_enabled)
    if enabled is None:
        result.errors.append(
            "'parsers.enabled' must be a list or comma-separated string of "
            f"provider names, got {type(raw_enabled).__name__}"
        )
        return result

    known = {p.value for p in MusicProvider}
    implemented = {p.value for p in PARSER_CLASSES}
    for key in enabled:
        if key not in known:
            result.errors.append(
                f"Unknown provider '{key}' in parsers.enabled. "
                f"Known providers: {', '.join(sorted(known))}"
            )
        elif key not in implemented:
            result.warnings.append(
                f"Provider '{key}' has no parser implementation yet and will be skipped"
            )

    if not enabled:
        result.warnings.append("'parsers.enabled' is empty; no URLs will be accepted")

    return result
