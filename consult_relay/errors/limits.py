"""Admission rejected by a sliding-window limiter."""

from __future__ import annotations

import math


class RateLimitError(Exception):
    """A client used up its window.

    ``retry_in`` is the number of seconds until the oldest admission in the
    window expires. ``key`` names the client for keyed limiters and is
    ``None`` for per-connection ones. Negative inputs are clamped to zero.
    """

    def __init__(
        self,
        *,
        retry_in: float,
        limit: int,
        window_seconds: float,
        key: str | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(message or "rate limit exceeded")
        self.retry_in = max(float(retry_in), 0.0)
        self.limit = max(int(limit), 0)
        self.window_seconds = max(float(window_seconds), 0.0)
        self.key = key

    @property
    def retry_after_seconds(self) -> int:
        """Whole seconds suitable for a ``Retry-After`` header (at least 1)."""
        return max(1, math.ceil(self.retry_in))


__all__ = ["RateLimitError"]
