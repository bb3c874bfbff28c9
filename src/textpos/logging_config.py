"""Logging setup for textpos.

The library only creates module loggers under the ``textpos`` namespace.
No handler is installed at import time; applications that want textpos
diagnostics on stderr call setup_logging() once at startup.
"""

from __future__ import annotations

import logging
import sys

from .config import Config, get_config


LOGGER_NAME = "textpos"


def setup_logging(config: Config | None = None) -> logging.Logger:
    """Send ``textpos`` log records to stderr at ``config.log_level``.

    Handlers from an earlier call are replaced, not duplicated.
    """
    if config is None:
        config = get_config()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the textpos namespace, e.g. ``textpos.composite``."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
