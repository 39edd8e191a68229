"""Logging setup shared by the API process."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def parse_log_level(value: str | int | None) -> int:
    """Translate ``LOG_LEVEL`` into a :mod:`logging` level.

    Accepts level names in any case, or integers. Blank and unknown values
    fall back to ``INFO``.
    """
    if value is None:
        return logging.INFO
    if isinstance(value, int):
        return value

    cleaned = value.strip()
    if not cleaned:
        return logging.INFO
    if cleaned.isdigit():
        return int(cleaned)

    level = logging.getLevelName(cleaned.upper())
    if isinstance(level, int):
        return level
    return logging.INFO


_handler: logging.Handler | None = None


def configure_logging(level: str | int | None = None) -> None:
    global _handler
    root = logging.getLogger()
    root.setLevel(parse_log_level(level))

    # Re-running create_app() (tests, reloads) must not stack handlers.
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if _handler not in root.handlers:
        root.addHandler(_handler)
