"""Process logging bootstrap."""

from __future__ import annotations

import logging

from .context import install_log_context
from ..config.logging import APP_LOG_LEVEL, APP_LOG_FORMAT, APP_LOG_DATEFMT


def _formatter() -> logging.Formatter:
    return logging.Formatter(APP_LOG_FORMAT, datefmt=APP_LOG_DATEFMT)


def configure_logging() -> None:
    """Apply the app level and format; safe to call more than once.

    When uvicorn (or pytest) already attached root handlers, they are
    reformatted in place instead of stacking a second stream handler.
    """
    install_log_context()
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(APP_LOG_LEVEL)
        for handler in root.handlers:
            handler.setFormatter(_formatter())
    else:
        logging.basicConfig(level=APP_LOG_LEVEL, format=APP_LOG_FORMAT, datefmt=APP_LOG_DATEFMT)
    logging.getLogger("consult_relay").setLevel(APP_LOG_LEVEL)


__all__ = ["configure_logging"]
