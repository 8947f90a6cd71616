"""Per-client sliding-window admission gate for the HTTP surface.

One event log per client key (the network origin of the request). Expiry is
computed lazily whenever a key is touched; there are no timers. Keys whose
log has fully expired are swept every ``sweep_every`` consume() calls so the
map does not grow with every address ever seen.

A ``threading.Lock`` guards the key map: FastAPI may run sync dependencies in
a worker thread, and the critical section never awaits.
"""

from __future__ import annotations

import time
import logging
import threading
import collections

from .limits import TimeFn
from ..errors import RateLimitError
from ..state.limits import RateLimitWindow
from ..config.branding import RATE_LIMIT_MESSAGE
from ..config.limits import (
    HTTP_RATE_LIMIT_POINTS,
    HTTP_RATE_LIMIT_SWEEP_EVERY,
    HTTP_RATE_LIMIT_WINDOW_SECONDS,
)

logger = logging.getLogger(__name__)


class KeyedRateLimiter:
    """At most ``limit`` admissions per key in any ``window_seconds`` interval.

    Attributes:
        limit: Admissions allowed per key per window. 0 disables the limiter.
        window_seconds: Rolling window duration. 0 disables the limiter.
        sweep_every: consume() calls between idle-key sweeps.
    """

    def __init__(
        self,
        *,
        limit: int = HTTP_RATE_LIMIT_POINTS,
        window_seconds: float = HTTP_RATE_LIMIT_WINDOW_SECONDS,
        now_fn: TimeFn | None = None,
        sweep_every: int = HTTP_RATE_LIMIT_SWEEP_EVERY,
    ) -> None:
        self.limit = max(0, int(limit))
        self.window_seconds = max(0.0, float(window_seconds))
        self.sweep_every = max(1, int(sweep_every))
        self._now = now_fn or time.monotonic
        self._logs: dict[str, collections.deque[float]] = {}
        self._lock = threading.Lock()
        self._calls = 0
        self._enabled = self.limit > 0 and self.window_seconds > 0

    def consume(self, key: str) -> None:
        """Admit one request for ``key`` or raise RateLimitError.

        A rejected request does not use up budget.

        Raises:
            RateLimitError: The key already has ``limit`` admissions in the
                current window. ``retry_in`` is the time until the oldest
                one expires.
        """
        if not self._enabled:
            return

        with self._lock:
            now = self._now()
            self._calls += 1
            if self._calls % self.sweep_every == 0:
                self._sweep(now)

            events = self._logs.get(key)
            if events is None:
                events = self._logs[key] = collections.deque()
            self._expire(events, now)

            if len(events) >= self.limit:
                retry_in = (events[0] + self.window_seconds) - now
                raise RateLimitError(
                    retry_in=retry_in,
                    limit=self.limit,
                    window_seconds=self.window_seconds,
                    key=key,
                    message=RATE_LIMIT_MESSAGE,
                )
            events.append(now)

    def snapshot(self, key: str) -> RateLimitWindow:
        """Return the remaining budget for ``key`` without consuming it."""
        with self._lock:
            now = self._now()
            events = self._logs.get(key)
            if events is not None:
                self._expire(events, now)
            used = len(events) if events else 0
            start = events[0] if events else now
        return RateLimitWindow(
            key=key,
            points=max(0, self.limit - used),
            window_start=start,
            window_seconds=self.window_seconds,
        )

    def tracked_keys(self) -> int:
        with self._lock:
            return len(self._logs)

    def reset(self, key: str | None = None) -> None:
        """Forget one key, or every key when ``key`` is None."""
        with self._lock:
            if key is None:
                self._logs.clear()
            else:
                self._logs.pop(key, None)

    def _expire(self, events: collections.deque[float], now: float) -> None:
        cutoff = now - self.window_seconds
        while events and events[0] <= cutoff:
            events.popleft()

    def _sweep(self, now: float) -> None:
        idle = []
        for key, events in self._logs.items():
            self._expire(events, now)
            if not events:
                idle.append(key)
        for key in idle:
            del self._logs[key]
        if idle:
            logger.debug("rate limiter swept %s idle keys", len(idle))


__all__ = ["KeyedRateLimiter"]
