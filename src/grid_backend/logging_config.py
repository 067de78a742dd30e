from __future__ import annotations

import logging
import os
from typing import Optional


def _get_log_level_from_env(env_var: str = "GRID_LOG_LEVEL") -> int:
    """
    Resolve the desired log level from an environment variable.

    Defaults to INFO when the variable is unset or invalid.
    """
    value = os.getenv(env_var, "INFO").upper()
    level = getattr(logging, value, logging.INFO)
    if not isinstance(level, int):
        return logging.INFO
    return level


def configure_logging(level: Optional[int] = None) -> None:
    """
    Configure basic logging for the backend.

    Safe to call repeatedly: when handlers already exist only the level is
    adjusted.
    """
    if level is None:
        level = _get_log_level_from_env()

    root_logger = logging.getLogger()

    if root_logger.handlers:
        root_logger.setLevel(level)
        return

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    logging.getLogger("uvicorn.access").setLevel(logging.INFO)


__all__ = ["configure_logging"]
