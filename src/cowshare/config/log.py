"""Logging setup for cowshare.

Modules log through `logging.getLogger(__name__)`; nothing is printed until
an application configures handlers, either its own or via configure_logging().
"""

from __future__ import annotations

import logging

from cowshare.config.settings import get_settings

LOGGER_NAME = "cowshare"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Handler installed by configure_logging(), at most one per process
_handler: logging.Handler | None = None


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling it again only updates the level.

    Args:
        level: Log level name. Defaults to the configured log_level.

    Returns:
        The package logger.
    """
    global _handler
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or get_settings().log_level).upper())

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(_FORMAT))
    if _handler not in logger.handlers:
        logger.addHandler(_handler)

    return logger
