"""Logging configuration module."""

from __future__ import annotations

import logging

from wardrobe_insight.config.settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logger according to project conventions.

    ``level`` overrides the configured ``LOG_LEVEL``; unknown names fall back
    to ``INFO``.
    """

    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )
