"""
URL normalization primitives shared by all provider parsers.

These helpers are pure string functions: no network access, no provider
knowledge. Parsers build their matching and sanitization on top of them.
"""

from __future__ import annotations

import re
from urllib.parse import parse_qs, urlsplit

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)


def normalize_url(url: str) -> str:
    """Trim whitespace and make sure the URL carries an http(s) scheme.

    Example:
        >>> normalize_url("  soundcloud.com/artist/track ")
        'https://soundcloud.com/artist/track'
        >>> normalize_url("http://soundcloud.com/artist/track")
        'http://soundcloud.com/artist/track'
    """
    normalized = url.strip()
    if not _SCHEME_RE.match(normalized):
        normalized = "https://" + normalized
    return normalized


def force_https(url: str) -> str:
    """Rewrite a leading http:// (any case) to https://."""
    return _SCHEME_RE.sub("https://", url, count=1)


def strip_query(url: str) -> str:
    """Drop everything from the first '?' or '#' onward."""
    return re.split(r"[?#]", url, maxsplit=1)[0]


def get_host(url: str) -> str:
    """Return the lowercase host of a URL, without port or credentials.

    The URL is normalized first, so scheme-less input works. Returns an
    empty string when no host can be determined.
    """
    try:
        return (urlsplit(normalize_url(url)).hostname or "").lower()
    except ValueError:
        # urlsplit rejects malformed IPv6 brackets
        return ""


def host_matches(host: str, domain: str) -> bool:
    """Check that host is domain itself or one of its subdomains."""
    host = host.lower().rstrip(".")
    domain = domain.lower()
    return host == domain or host.endswith("." + domain)


def extract_query_params(url: str) -> dict[str, str]:
    """Return the first value of every query parameter in the URL."""
    query = urlsplit(normalize_url(url)).query
    return {key: values[0] for key, values in parse_qs(query).items() if values}
