"""Centralized exception classes for the consultation server.

Organization:
    - validation.py: Malformed or incomplete requests (HTTP 4xx)
    - limits.py: Rate limiting errors with retry info (HTTP 429)
    - processing.py: Internal faults with a user-facing fallback (HTTP 500)
    - capacity.py: Channel admission at capacity
    - classify.py: Exception-to-telemetry label mapping
"""

from .limits import RateLimitError
from .classify import classify_error
from .capacity import SessionCapacityError
from .validation import ValidationError, PayloadTooLargeError
from .processing import InternalProcessingError

__all__ = [
    "ValidationError",
    "PayloadTooLargeError",
    "RateLimitError",
    "InternalProcessingError",
    "SessionCapacityError",
    "classify_error",
]
