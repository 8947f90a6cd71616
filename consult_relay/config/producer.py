"""Constants for the synthetic result producer.

None of these numbers mean anything; they only shape the demo payloads.
"""

import os


CONSULTATION_BASE_VALUE = int(os.getenv("CONSULTATION_BASE_VALUE", "750000000"))
CONSULTATION_CERTAINTY = float(os.getenv("CONSULTATION_CERTAINTY", "97.3"))

# Multipliers applied to the base value per company size
COMPANY_SIZE_MULTIPLIERS: dict[str, float] = {
    "startup": 1.0,
    "mid": 1.0,
    "large": 1.0,
    "enterprise": 1.0,
}

ANALYSIS_VALUE_MIN = int(os.getenv("ANALYSIS_VALUE_MIN", "50000000"))
ANALYSIS_VALUE_SPAN = int(os.getenv("ANALYSIS_VALUE_SPAN", "100000000"))

# Optional seed for reproducible demo output (unset = system entropy)
PRODUCER_SEED = os.getenv("PRODUCER_SEED")

__all__ = [
    "CONSULTATION_BASE_VALUE",
    "CONSULTATION_CERTAINTY",
    "COMPANY_SIZE_MULTIPLIERS",
    "ANALYSIS_VALUE_MIN",
    "ANALYSIS_VALUE_SPAN",
    "PRODUCER_SEED",
]
