"""Process-wide logging setup for the sidekick server.

stdout carries the MCP stdio stream, so console output always goes to stderr.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOGGER_NAME = "lm_sidekick"
SERVICE_NAME = "lm-studio-mcp-sidekick"
LOG_FORMAT = "%(asctime)s %(service)s [%(name)s] %(levelname)s %(message)s"
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 5


def resolve_level(level: str | int) -> int:
    """Map a level name such as ``"debug"`` to its number, defaulting to INFO."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(
    level: str | int = "info",
    log_dir: Optional[str | Path] = None,
) -> logging.Logger:
    """
    Attach console and (optionally) rotating file handlers to the package logger.

    Args:
        level: Minimum level for the package logger.
        log_dir: Directory for ``error.log`` and ``combined.log``; ``None`` keeps
                 logging on stderr only.

    Returns:
        The configured ``lm_sidekick`` logger. Calling again replaces the handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_level(level))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, defaults={"service": SERVICE_NAME})

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_dir:
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)

        errors = RotatingFileHandler(
            directory / "error.log", maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS
        )
        errors.setLevel(logging.ERROR)
        errors.setFormatter(formatter)
        logger.addHandler(errors)

        combined = RotatingFileHandler(
            directory / "combined.log", maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS
        )
        combined.setFormatter(formatter)
        logger.addHandler(combined)

    logger.propagate = False
    return logger


__all__ = ["SERVICE_NAME", "configure_logging", "resolve_level"]
