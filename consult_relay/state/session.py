"""Session-scoped dataclasses for per-connection channel state.

SessionStatus:
    CONNECTED -> DISCONNECTED. DISCONNECTED is terminal; the registry evicts
    the session in the same step, so nothing resolves it afterwards.

Session:
    One live push channel. The dispatcher never holds a Session across an
    await; it keeps the id and re-resolves through the registry.
"""

from __future__ import annotations

import time
import enum
from typing import Any
from datetime import datetime
from dataclasses import field, dataclass

from ..utils.time_utils import utc_now


class SessionStatus(str, enum.Enum):
    """Lifecycle states of a channel session."""

    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


@dataclass
class Session:
    """Registry-owned record of a connected channel.

    Attributes:
        session_id: Opaque identifier assigned at connection time.
        channel: Transport handle exposing ``send_text`` (a WebSocket).
        client_id: Network origin of the peer, used for logging.
        connected_at: Wall-clock connection time (UTC).
        status: Current lifecycle state.
        started_monotonic: Monotonic timestamp used for duration metrics.
    """

    session_id: str
    channel: Any
    client_id: str = "-"
    connected_at: datetime = field(default_factory=utc_now)
    status: SessionStatus = SessionStatus.CONNECTED
    started_monotonic: float = field(default_factory=time.monotonic)

    @property
    def is_connected(self) -> bool:
        return self.status is SessionStatus.CONNECTED

    def mark_disconnected(self) -> None:
        self.status = SessionStatus.DISCONNECTED

    def duration_seconds(self) -> float:
        return max(0.0, time.monotonic() - self.started_monotonic)


__all__ = ["Session", "SessionStatus"]
