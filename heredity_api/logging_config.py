"""Logging setup shared by ``main.py`` and the API server.

The model packages only create module loggers; nothing below ``heredity`` or
``heredity_api`` configures handlers. ``main.py`` calls configure_logging once
per command, before any population is parsed.
"""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "HEREDITY_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Loggers whose level follows the configured level.
PROJECT_LOGGERS = ("heredity", "heredity_api", "main")
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_level(level: str | None = None) -> str:
    """Level name from the argument, else HEREDITY_LOG_LEVEL, else INFO."""
    raw_level = level if level is not None else os.getenv(LOG_LEVEL_ENV)
    return (raw_level or "INFO").upper()


def configure_logging(*, level: str | None = None, serving: bool = False) -> logging.Logger:
    """Configure root logging for a CLI command or the API server.

    Args:
        level: Explicit level name, e.g. from ``--log-level``.
        serving: The command runs uvicorn, whose loggers are aligned too.

    Returns:
        The ``heredity`` logger.
    """
    resolved_level = resolve_level(level)
    logging.basicConfig(level=resolved_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    logger_names = PROJECT_LOGGERS + (UVICORN_LOGGERS if serving else ())
    for name in logger_names:
        logging.getLogger(name).setLevel(resolved_level)

    heredity_logger = logging.getLogger("heredity")
    heredity_logger.debug("Logging configured at %s", resolved_level)
    return heredity_logger
