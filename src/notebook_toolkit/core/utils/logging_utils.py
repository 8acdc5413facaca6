"""
Logging utilities for host applications embedding the toolkit.

Library modules only create loggers (``logging.getLogger(__name__)``);
attaching handlers is left to the application, which can call
``configure_logging`` once at startup.
"""
from __future__ import annotations

import logging
from typing import Optional, TextIO

PACKAGE_LOGGER_NAME = "notebook_toolkit"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


class _ToolkitStreamHandler(logging.StreamHandler):
    """Marker subclass so repeated configuration can find its own handler."""


def configure_logging(
    level: int = logging.INFO,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Attach a formatted stream handler to the package logger.

    Calling this again replaces the previously attached handler instead of
    stacking a second one.

    Args:
        level: Level for the package logger.
        stream: Output stream (default: stderr).

    Returns:
        The package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, _ToolkitStreamHandler):
            logger.removeHandler(handler)

    handler = _ToolkitStreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
