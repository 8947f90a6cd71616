"""Logging helpers and context utilities."""

from .setup import configure_logging
from .context import (
    log_context,
    set_log_context,
    reset_log_context,
    current_log_context,
    install_log_context,
)

__all__ = [
    "configure_logging",
    "current_log_context",
    "install_log_context",
    "log_context",
    "reset_log_context",
    "set_log_context",
]
