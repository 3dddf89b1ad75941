"""
URL normalization utilities.
"""

from tunelink.parsing.urls import (
    extract_query_params,
    force_https,
    get_host,
    host_matches,
    normalize_url,
    strip_query,
)

__all__ = [
    "normalize_url",
    "force_https",
    "strip_query",
    "get_host",
    "host_matches",
    "extract_query_params",
]
