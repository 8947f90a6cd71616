"""Process-wide platform metric defaults and drift rules.

The status endpoint and the channel welcome notice both report these values.
They only change through ``PlatformState.advance()``; the optional drift
daemon calls it every ``PLATFORM_DRIFT_INTERVAL_S`` seconds (0 = never).
"""

import os


PLATFORM_INITIAL_SUPERINTELLIGENCE_LEVEL = float(os.getenv("PLATFORM_SUPERINTELLIGENCE_LEVEL", "156"))
PLATFORM_INITIAL_CONSCIOUSNESS_DEPTH = float(os.getenv("PLATFORM_CONSCIOUSNESS_DEPTH", "94.7"))
PLATFORM_INITIAL_OMNISCIENCE_FACTOR = float(os.getenv("PLATFORM_OMNISCIENCE_FACTOR", "91.2"))
PLATFORM_INITIAL_REALITY_MANIPULATION = float(os.getenv("PLATFORM_REALITY_MANIPULATION", "87.3"))
PLATFORM_INITIAL_OPTIMIZATION_MULTIPLIER = float(os.getenv("PLATFORM_OPTIMIZATION_MULTIPLIER", "23.7"))
PLATFORM_INITIAL_QUANTUM_PROCESSORS = int(os.getenv("PLATFORM_QUANTUM_PROCESSORS", "10247"))

# Drift step ceilings (each step adds uniform(0, step))
PLATFORM_LEVEL_STEP = 2.0
PLATFORM_DEPTH_STEP = 0.1
PLATFORM_OMNISCIENCE_STEP = 0.15
PLATFORM_REALITY_STEP = 0.05
PLATFORM_PROCESSOR_STEP = 100

# Percentage-style metrics never exceed this cap
PLATFORM_PERCENT_CAP = 99.9

PLATFORM_DRIFT_INTERVAL_S = float(os.getenv("PLATFORM_DRIFT_INTERVAL_S", "0"))

__all__ = [
    "PLATFORM_INITIAL_SUPERINTELLIGENCE_LEVEL",
    "PLATFORM_INITIAL_CONSCIOUSNESS_DEPTH",
    "PLATFORM_INITIAL_OMNISCIENCE_FACTOR",
    "PLATFORM_INITIAL_REALITY_MANIPULATION",
    "PLATFORM_INITIAL_OPTIMIZATION_MULTIPLIER",
    "PLATFORM_INITIAL_QUANTUM_PROCESSORS",
    "PLATFORM_LEVEL_STEP",
    "PLATFORM_DEPTH_STEP",
    "PLATFORM_OMNISCIENCE_STEP",
    "PLATFORM_REALITY_STEP",
    "PLATFORM_PROCESSOR_STEP",
    "PLATFORM_PERCENT_CAP",
    "PLATFORM_DRIFT_INTERVAL_S",
]
