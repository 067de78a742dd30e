from __future__ import annotations

import os
from typing import List

# === HTTP API ===

DEFAULT_CORS_ORIGINS: List[str] = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

# === Cell limits ===

# Upper bound on the raw text accepted for a single cell edit. URL
# normalization scans the whole content, so callers cap it here rather
# than inside the normalizer.
DEFAULT_MAX_CELL_CONTENT_CHARS = 10_000


def get_cors_origins() -> List[str]:
    """
    Return the list of allowed CORS origins for the API.

    Controlled via GRID_CORS_ORIGINS (comma-separated). Falls back to the
    local dev origins.
    """
    raw = os.environ.get("GRID_CORS_ORIGINS")
    if raw is not None:
        origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
        if origins:
            return origins
    return DEFAULT_CORS_ORIGINS


def get_max_cell_content_chars() -> int:
    """
    Return the maximum number of characters accepted in one cell edit.

    Reads GRID_MAX_CELL_CONTENT_CHARS; missing, invalid or non-positive values
    fall back to DEFAULT_MAX_CELL_CONTENT_CHARS.
    """
    raw = os.environ.get("GRID_MAX_CELL_CONTENT_CHARS")
    if raw is None:
        return DEFAULT_MAX_CELL_CONTENT_CHARS
    try:
        value = int(raw.strip())
    except ValueError:
        return DEFAULT_MAX_CELL_CONTENT_CHARS
    if value <= 0:
        return DEFAULT_MAX_CELL_CONTENT_CHARS
    return value


__all__ = [
    "DEFAULT_CORS_ORIGINS",
    "DEFAULT_MAX_CELL_CONTENT_CHARS",
    "get_cors_origins",
    "get_max_cell_content_chars",
]
