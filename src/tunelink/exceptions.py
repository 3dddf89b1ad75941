"""
Custom exceptions for tunelink.

All tunelink exceptions inherit from TunelinkError for easy catching.
"""

from __future__ import annotations

from typing import Any


class TunelinkError(Exception):
    """Base exception for all tunelink errors."""

    code = "TUNELINK_ERROR"

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a structured dict for error responses."""
        return {
            "type": self.__class__.__name__,
            "message": str(self),
            "code": self.code,
        }


class InvalidMusicUrlError(TunelinkError):
    """URL is empty, belongs to no registered provider, or has an unknown shape.

    This is a terminal condition: the input is malformed or unsupported, so
    callers should report it back rather than retry.

    Attributes:
        url: The offending input, exactly as received.
        reason: Human-readable explanation (e.g. "Not a SoundCloud URL").
    """

    code = "INVALID_URL"

    def __init__(self, url: Any, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid music URL: {reason}")

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["url"] = self.url if isinstance(self.url, str) else repr(self.url)
        result["reason"] = self.reason
        return result


class MetadataError(TunelinkError):
    """Error fetching track or playlist metadata for a sanitized URL."""

    code = "RESOLVE_ERROR"

    def __init__(self, message: str, *, url: str | None = None):
        super().__init__(message)
        self.url = url

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.url:
            result["url"] = self.url
        return result


class ConfigError(TunelinkError):
    """Invalid configuration value or unknown provider key."""

    code = "CONFIG_ERROR"
