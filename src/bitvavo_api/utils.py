"""
Utility functions for the Bitvavo client.
"""

import time
from typing import Any, Iterable, Optional, Tuple
from urllib.parse import urlencode

from .codec import WireEnum


def build_query(params: Optional[Iterable[Tuple[str, Any]]]) -> str:
    """Render ordered query parameters, skipping the ones set to None.

    Returns an empty string when nothing is left, otherwise the parameters
    joined with ``&`` behind a leading ``?``.
    """
    if not params:
        return ""

    present = [
        (key, value.to_wire() if isinstance(value, WireEnum) else value)
        for key, value in params
        if value is not None
    ]
    if not present:
        return ""
    return "?" + urlencode(present)


def validate_url(url: str) -> bool:
    """Validate URL format."""
    if not url or not isinstance(url, str):
        return False
    return url.startswith(("http://", "https://")) and "." in url


def current_timestamp_ms() -> int:
    """Wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)
