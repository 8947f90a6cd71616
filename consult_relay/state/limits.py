"""Rate limiter introspection and delivery outcome types."""

from __future__ import annotations

import enum
from dataclasses import dataclass


@dataclass(frozen=True)
class RateLimitWindow:
    """Point-in-time view of one client key's admission budget.

    Attributes:
        key: Client identifier (network origin).
        points: Remaining admissions in the current window.
        window_start: Monotonic time of the oldest admission still counted,
            or the snapshot time when nothing is counted.
        window_seconds: Window duration.
    """

    key: str
    points: int
    window_start: float
    window_seconds: float


class DeliveryOutcome(str, enum.Enum):
    """What happened to a push after its result was produced."""

    DELIVERED = "delivered"
    DROPPED = "dropped"


__all__ = ["RateLimitWindow", "DeliveryOutcome"]
