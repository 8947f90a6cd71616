"""Immutable snapshot of the process-wide platform metrics."""

from __future__ import annotations

from dataclasses import dataclass

from ..config.platform import (
    PLATFORM_INITIAL_CONSCIOUSNESS_DEPTH,
    PLATFORM_INITIAL_OMNISCIENCE_FACTOR,
    PLATFORM_INITIAL_QUANTUM_PROCESSORS,
    PLATFORM_INITIAL_REALITY_MANIPULATION,
    PLATFORM_INITIAL_OPTIMIZATION_MULTIPLIER,
    PLATFORM_INITIAL_SUPERINTELLIGENCE_LEVEL,
)


@dataclass(frozen=True)
class PlatformMetrics:
    """Values reported by ``GET /api/v1/asi-status`` and the welcome notice."""

    superintelligence_level: float = PLATFORM_INITIAL_SUPERINTELLIGENCE_LEVEL
    consciousness_depth: float = PLATFORM_INITIAL_CONSCIOUSNESS_DEPTH
    omniscience_factor: float = PLATFORM_INITIAL_OMNISCIENCE_FACTOR
    reality_manipulation_power: float = PLATFORM_INITIAL_REALITY_MANIPULATION
    business_optimization_multiplier: float = PLATFORM_INITIAL_OPTIMIZATION_MULTIPLIER
    quantum_processors: int = PLATFORM_INITIAL_QUANTUM_PROCESSORS

    def as_payload(self) -> dict[str, float | int]:
        return {
            "superintelligenceLevel": round(self.superintelligence_level, 2),
            "consciousnessDepth": round(self.consciousness_depth, 2),
            "omniscienceFactor": round(self.omniscience_factor, 2),
            "realityManipulationPower": round(self.reality_manipulation_power, 2),
            "businessOptimizationMultiplier": round(self.business_optimization_multiplier, 2),
            "quantumProcessors": int(self.quantum_processors),
        }


__all__ = ["PlatformMetrics"]
