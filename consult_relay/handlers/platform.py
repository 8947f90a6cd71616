"""Process-wide platform metrics with explicit read and write paths.

``snapshot()`` is the only read path and ``advance()`` the only write path.
Each advance adds a uniform random step to every metric; percentage-style
metrics are capped at PLATFORM_PERCENT_CAP.
"""

from __future__ import annotations

import random
import logging
import threading
from dataclasses import replace

from ..state.platform import PlatformMetrics
from ..config.platform import (
    PLATFORM_LEVEL_STEP,
    PLATFORM_DEPTH_STEP,
    PLATFORM_PERCENT_CAP,
    PLATFORM_REALITY_STEP,
    PLATFORM_PROCESSOR_STEP,
    PLATFORM_OMNISCIENCE_STEP,
)

logger = logging.getLogger(__name__)


class PlatformState:
    """Owner of the current PlatformMetrics snapshot."""

    def __init__(
        self,
        initial: PlatformMetrics | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._metrics = initial or PlatformMetrics()
        self._rng = rng or random.Random()
        self._lock = threading.Lock()

    def snapshot(self) -> PlatformMetrics:
        return self._metrics

    def advance(self) -> PlatformMetrics:
        """Apply one drift step and return the new snapshot."""
        with self._lock:
            current = self._metrics
            rng = self._rng
            updated = replace(
                current,
                superintelligence_level=current.superintelligence_level
                + rng.uniform(0, PLATFORM_LEVEL_STEP),
                consciousness_depth=_capped(
                    current.consciousness_depth + rng.uniform(0, PLATFORM_DEPTH_STEP)
                ),
                omniscience_factor=_capped(
                    current.omniscience_factor + rng.uniform(0, PLATFORM_OMNISCIENCE_STEP)
                ),
                reality_manipulation_power=_capped(
                    current.reality_manipulation_power + rng.uniform(0, PLATFORM_REALITY_STEP)
                ),
                quantum_processors=current.quantum_processors
                + rng.randint(0, PLATFORM_PROCESSOR_STEP),
            )
            self._metrics = updated
        logger.debug(
            "platform advanced level=%.2f processors=%s",
            updated.superintelligence_level,
            updated.quantum_processors,
        )
        return updated


def _capped(value: float) -> float:
    return min(PLATFORM_PERCENT_CAP, value)


__all__ = ["PlatformState"]
