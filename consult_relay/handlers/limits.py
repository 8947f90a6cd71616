"""Per-connection admission budget.

Every channel connection gets its own ``SlidingWindowRateLimiter`` so one
chatty browser tab cannot flood the analysis producer. Admissions are kept
as monotonic timestamps; anything at or before ``now - window_seconds`` has
left the window. A zero limit or window turns the limiter off.
"""

from __future__ import annotations

import time
from collections import deque
from collections.abc import Callable

from ..errors import RateLimitError

TimeFn = Callable[[], float]


class SlidingWindowRateLimiter:
    """Rolling-window counter for a single event stream (not thread-safe)."""

    def __init__(
        self,
        *,
        limit: int,
        window_seconds: float,
        now_fn: TimeFn | None = None,
    ) -> None:
        self.limit = max(int(limit), 0)
        self.window_seconds = max(float(window_seconds), 0.0)
        self._clock = now_fn or time.monotonic
        self._admitted: deque[float] = deque()

    @property
    def enabled(self) -> bool:
        return bool(self.limit) and self.window_seconds > 0

    def remaining(self) -> int:
        if not self.enabled:
            return self.limit
        self._expire(self._clock())
        return max(self.limit - len(self._admitted), 0)

    def consume(self) -> None:
        """Admit one event now, or raise ``RateLimitError`` with the wait time."""
        if not self.enabled:
            return
        now = self._clock()
        self._expire(now)
        if len(self._admitted) < self.limit:
            self._admitted.append(now)
            return
        frees_at = self._admitted[0] + self.window_seconds
        raise RateLimitError(
            retry_in=frees_at - now,
            limit=self.limit,
            window_seconds=self.window_seconds,
        )

    def _expire(self, now: float) -> None:
        horizon = now - self.window_seconds
        admitted = self._admitted
        while admitted and admitted[0] <= horizon:
            admitted.popleft()


__all__ = ["RateLimitError", "SlidingWindowRateLimiter", "TimeFn"]
