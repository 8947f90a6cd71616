"""Malformed or incomplete client input."""

from __future__ import annotations


class ValidationError(Exception):
    """Input rejected before any work was done.

    ``error_code`` is a stable snake_case identifier (``missing_business_query``,
    ``invalid_body`` ...) returned to the client next to ``message``. These are
    client mistakes, so handlers answer them with 400 or an ``asiError``
    notice and log them at info level at most.
    """

    def __init__(self, error_code: str, message: str) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.error_code!r}, {self.message!r})"


class PayloadTooLargeError(ValidationError):
    """Request body over ``limit_bytes``; answered with 413 before admission."""

    def __init__(self, limit_bytes: int) -> None:
        super().__init__("payload_too_large", f"Request body exceeds {limit_bytes} bytes")
        self.limit_bytes = limit_bytes


__all__ = ["ValidationError", "PayloadTooLargeError"]
