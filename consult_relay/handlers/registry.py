"""Session registry for live push channels.

The registry is the only owner of Session records. It enforces the
MAX_CONCURRENT_CONNECTIONS limit in two stages:

1. Semaphore acquisition (with timeout) to reserve a slot
2. Lock-protected map insertion to register the session

Removal evicts the session and releases its slot exactly once, so a
double-remove from racing cleanup paths is harmless.

Example:
    registry = SessionRegistry(max_sessions=100)

    try:
        session_id = await registry.create(ws, client_id="10.0.0.1")
    except SessionCapacityError:
        await reject_connection(ws, ...)
        return
    try:
        ...
    finally:
        await registry.remove(session_id)
"""

from __future__ import annotations

import uuid
import asyncio
import logging
from typing import Any
from collections.abc import Callable

from ..state.session import Session
from ..errors import SessionCapacityError
from ..telemetry.instruments import get_metrics
from ..config.limits import MAX_CONCURRENT_CONNECTIONS
from ..config.websocket import WS_HANDSHAKE_ACQUIRE_TIMEOUT_S

logger = logging.getLogger(__name__)


def _new_session_id() -> str:
    return uuid.uuid4().hex


class SessionRegistry:
    """Tracks connected sessions and enforces the concurrency limit.

    Attributes:
        max_sessions: Maximum concurrently registered sessions.
        acquire_timeout: Max seconds to wait for a free slot.
    """

    def __init__(
        self,
        max_sessions: int = MAX_CONCURRENT_CONNECTIONS,
        acquire_timeout: float = WS_HANDSHAKE_ACQUIRE_TIMEOUT_S,
        id_factory: Callable[[], str] | None = None,
    ):
        if max_sessions <= 0:
            raise ValueError("max_sessions must be positive")
        self.max_sessions = max_sessions
        self.acquire_timeout = acquire_timeout
        self._id_factory = id_factory or _new_session_id
        self._sessions: dict[str, Session] = {}
        self._lock = asyncio.Lock()  # Protects _sessions
        self._semaphore = asyncio.Semaphore(max_sessions)

    async def create(self, channel: Any, *, client_id: str = "-") -> str:
        """Register a new CONNECTED session for ``channel``.

        Returns:
            The new session id.

        Raises:
            SessionCapacityError: No slot freed up within ``acquire_timeout``.
        """
        try:
            await asyncio.wait_for(self._semaphore.acquire(), timeout=self.acquire_timeout)
        except asyncio.TimeoutError as exc:
            logger.warning(
                "Session rejected: at capacity (%s/%s)",
                len(self._sessions),
                self.max_sessions,
            )
            raise SessionCapacityError(active=len(self._sessions), limit=self.max_sessions) from exc

        try:
            async with self._lock:
                session_id = self._id_factory()
                while session_id in self._sessions:
                    session_id = self._id_factory()
                self._sessions[session_id] = Session(
                    session_id=session_id,
                    channel=channel,
                    client_id=client_id,
                )
                active = len(self._sessions)
        except BaseException:
            self._semaphore.release()
            raise

        metrics = get_metrics()
        metrics.sessions_total.add(1)
        metrics.active_sessions.add(1)
        logger.info("Session registered: %s/%s active", active, self.max_sessions)
        return session_id

    async def remove(self, session_id: str) -> bool:
        """Mark the session DISCONNECTED and evict it.

        Returns:
            True if a live session was removed, False for unknown ids.
        """
        async with self._lock:
            session = self._sessions.pop(session_id, None)
            active = len(self._sessions)
        if session is None:
            return False

        session.mark_disconnected()
        self._semaphore.release()
        get_metrics().active_sessions.add(-1)
        logger.info(
            "Session removed after %.1fs: %s/%s active",
            session.duration_seconds(),
            active,
            self.max_sessions,
        )
        return True

    def resolve(self, session_id: str) -> Session | None:
        """Return the live session for ``session_id`` or None. Never raises."""
        session = self._sessions.get(session_id)
        if session is None or not session.is_connected:
            return None
        return session

    def count(self) -> int:
        return len(self._sessions)

    def capacity_info(self) -> dict[str, int | bool]:
        active = len(self._sessions)
        return {
            "active": active,
            "max": self.max_sessions,
            "available": self.max_sessions - active,
            "at_capacity": active >= self.max_sessions,
        }


__all__ = ["SessionRegistry"]
