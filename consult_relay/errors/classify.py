"""Metric label for an exception."""

from __future__ import annotations

from .limits import RateLimitError
from .capacity import SessionCapacityError
from .validation import ValidationError
from .processing import InternalProcessingError

# Checked in order; first isinstance match wins
ERROR_CATEGORIES: tuple[tuple[type[BaseException], str], ...] = (
    (ValidationError, "validation"),
    (RateLimitError, "rate_limit"),
    (SessionCapacityError, "capacity"),
    (InternalProcessingError, "internal"),
    (TimeoutError, "timeout"),
    (ConnectionError, "connection"),
)


def classify_error(exc: BaseException) -> str:
    return next((label for kind, label in ERROR_CATEGORIES if isinstance(exc, kind)), "unknown")


__all__ = ["ERROR_CATEGORIES", "classify_error"]
