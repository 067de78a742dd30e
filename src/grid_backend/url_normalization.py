from __future__ import annotations

import re
from threading import Lock
from typing import Pattern
from urllib.parse import urlsplit

URL_PATTERN_SOURCE = (
    r"(https?://)?(www\.)?"
    r"[a-zA-Z0-9@:%._+~#=]{2,256}\.[a-z]{2,6}\b"
    r"([-a-zA-Z0-9@:%_+.~#?&/=]*)"
)

_url_pattern: Pattern[str] | None = None
_url_pattern_lock = Lock()


def get_url_pattern() -> Pattern[str]:
    """
    Lazily compile and cache the URL-matching pattern.

    The compiled pattern is shared process-wide and never mutated, so only
    the first call takes the lock.
    """
    global _url_pattern
    if _url_pattern is None:
        with _url_pattern_lock:
            if _url_pattern is None:
                _url_pattern = re.compile(URL_PATTERN_SOURCE)
    return _url_pattern


def find_url(text: str) -> str | None:
    """
    Return the first URL-shaped substring of ``text``, or None.
    """
    match = get_url_pattern().search(text)
    if match is None:
        return None
    return match.group(0)


def auto_append_scheme(matched: str) -> str:
    """
    Qualify a matched URL with the https scheme.

    Current semantics:
    - An absolute URL whose scheme is already https is returned unchanged,
      including the authority-less "https:host" form.
    - A port outside 0-65535 makes the URL unparseable.
    - Anything else (other schemes, bare hosts, unparseable text) gets
      "https://" prepended to the raw matched text. An http:// match
      therefore becomes "https://http://...".
    """
    try:
        parts = urlsplit(matched)
        # Raises ValueError for out-of-range or non-numeric ports.
        parts.port
    except ValueError:
        return f"https://{matched}"

    if parts.scheme == "https" and (parts.netloc or parts.path):
        return matched
    return f"https://{matched}"


def extract_url(text: str) -> str:
    """
    Find the first URL in free text and normalize it; "" when none is found.
    """
    matched = find_url(text)
    if matched is None:
        return ""
    return auto_append_scheme(matched)


__all__ = [
    "URL_PATTERN_SOURCE",
    "auto_append_scheme",
    "extract_url",
    "find_url",
    "get_url_pattern",
]
