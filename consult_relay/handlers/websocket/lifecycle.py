"""Idle enforcement for channel connections.

A channel that receives no client frame for ``WS_IDLE_TIMEOUT_S`` is closed
with ``WS_CLOSE_IDLE_CODE``. Server pushes do not count as activity; clients
that only listen keep the channel open with ``ping``. A timeout of 0 turns
the watchdog off. The watchdog sleeps until the current idle deadline
(never longer than one tick), so ``touch()`` simply pushes the deadline out.
"""

from __future__ import annotations

import time
import asyncio
import logging
import contextlib
from typing import Any

from ...config.websocket import (
    WS_IDLE_TIMEOUT_S,
    WS_WATCHDOG_TICK_S,
    WS_CLOSE_IDLE_CODE,
    WS_CLOSE_IDLE_REASON,
)

logger = logging.getLogger(__name__)


class WebSocketLifecycle:
    """Owns the idle deadline and the watchdog task of one channel."""

    def __init__(
        self,
        websocket: Any,
        idle_timeout_s: float | None = None,
        watchdog_tick_s: float | None = None,
        idle_close_code: int | None = None,
    ):
        self._channel = websocket
        timeout = WS_IDLE_TIMEOUT_S if idle_timeout_s is None else idle_timeout_s
        self.idle_timeout_s = max(0.0, float(timeout))
        tick = WS_WATCHDOG_TICK_S if watchdog_tick_s is None else watchdog_tick_s
        self.watchdog_tick_s = float(tick) if tick and tick > 0 else 1.0
        self._close_code = WS_CLOSE_IDLE_CODE if idle_close_code is None else idle_close_code
        self._deadline = time.monotonic() + self.idle_timeout_s
        self._closing = asyncio.Event()
        self._expired = False
        self._watchdog: asyncio.Task | None = None

    @property
    def enabled(self) -> bool:
        return self.idle_timeout_s > 0

    def touch(self) -> None:
        self._deadline = time.monotonic() + self.idle_timeout_s

    def remaining(self) -> float:
        return self._deadline - time.monotonic()

    def should_close(self) -> bool:
        """True once the channel is being torn down for any reason."""
        return self._closing.is_set()

    def idle_timed_out(self) -> bool:
        return self._expired

    def start(self) -> asyncio.Task | None:
        if not self.enabled:
            return None
        if self._watchdog is None:
            self.touch()
            self._watchdog = asyncio.create_task(self._watch(), name="channel-idle-watchdog")
        return self._watchdog

    async def stop(self) -> None:
        self._closing.set()
        watchdog, self._watchdog = self._watchdog, None
        if watchdog is None or watchdog.done():
            return
        watchdog.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await watchdog

    async def _watch(self) -> None:
        while not self._closing.is_set():
            left = self.remaining()
            if left <= 0:
                await self._expire()
                return
            await asyncio.sleep(min(left, self.watchdog_tick_s))

    async def _expire(self) -> None:
        logger.info("channel idle for %.1fs; closing", self.idle_timeout_s)
        self._expired = True
        self._closing.set()
        with contextlib.suppress(Exception):
            await self._channel.close(code=self._close_code, reason=WS_CLOSE_IDLE_REASON)


__all__ = ["WebSocketLifecycle"]
