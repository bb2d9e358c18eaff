"""Logging helpers for sqlident."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "SQLIDENT_LOG_LEVEL"


def resolve_log_level(default: int = logging.INFO) -> int:
    """
    Level named by ``SQLIDENT_LOG_LEVEL`` (e.g. ``DEBUG``), else ``default``.
    """
    name = os.getenv(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return default


def configure_logging(level: int | None = None) -> None:
    logger = logging.getLogger("sqlident")
    if logger.handlers:
        return
    if level is None:
        level = resolve_log_level()
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(f"sqlident.{name}")
