"""Log handler setup for the package logger."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

PACKAGE_LOGGER = "mc_spawn_overlay"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a single rich console handler to the package logger."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(rich_tracebacks=True, show_path=False))
    logger.propagate = False
    return logger
