"""Helpers for configuring consistent project logging output."""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "FOUND_HAIKU_LOG_LEVEL"

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_CONFIGURED = False


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    try:
        return int(level)
    except (TypeError, ValueError):
        normalized = str(level).strip().upper()
        resolved = getattr(logging, normalized, logging.INFO)
        return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Optional[str | int] = None, *, force: bool = False) -> int:
    """Install the root handler and set the ``found_haiku`` logger level.

    The level comes from ``level`` when given, otherwise from the
    ``FOUND_HAIKU_LOG_LEVEL`` environment variable, otherwise ``INFO``.
    Repeated calls are ignored unless ``force`` is set. Returns the level
    that is in effect for the package logger.
    """

    global _CONFIGURED

    package_logger = logging.getLogger("found_haiku")
    if _CONFIGURED and not force:
        return package_logger.level

    env_level = os.environ.get(LOG_LEVEL_ENV)
    resolved_level = _resolve_level(level if level is not None else env_level)

    logging.basicConfig(level=resolved_level, format=_DEFAULT_FORMAT, force=force)
    package_logger.setLevel(resolved_level)
    _CONFIGURED = True
    return resolved_level


__all__ = ["configure_logging", "LOG_LEVEL_ENV"]
