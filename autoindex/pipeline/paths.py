"""
Pipeline - Path Helpers

Lookup-key normalization for page paths and depth attribute parsing.
"""

import re
from typing import Optional, Union

LOCALE_SEGMENT = re.compile(r"[a-zA-Z]{2}/")
LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def normalize_path(raw: str) -> str:
    """
    Turn a location path into a wiki lookup key.

    A rooted path ("/en/docs/intro") loses its leading slash and a two-letter
    locale segment ("docs/intro"). Unrooted paths are returned unchanged.

    Args:
        raw: Raw path, usually the current page location

    Returns:
        Path usable as a lookup key (never as a display value)
    """
    if not raw.startswith("/"):
        return raw

    path = raw[1:]
    if LOCALE_SEGMENT.match(path):
        path = path[3:]
    return path


def parse_depth(value: Optional[Union[str, int]]) -> int:
    """Parse a depth attribute: its leading integer, or 1 if missing or below 1."""
    if value is None:
        return 1
    if isinstance(value, int):
        return value if value >= 1 else 1

    match = LEADING_INT.match(value)
    if not match:
        return 1
    depth = int(match.group(1))
    return depth if depth >= 1 else 1
