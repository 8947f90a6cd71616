"""Customer-facing strings and provenance tags.

Every user-visible message the server emits lives here so the HTTP and
channel surfaces stay consistent. None of these carry internal detail.
"""

from __future__ import annotations

import os

# ============================================================================
# Provenance
# ============================================================================

ASI_SIGNATURE = os.getenv("ASI_SIGNATURE", "R³-ASI-ENTERPRISE-v1.0")
CONSULTATION_SIGNATURE_PREFIX = "R3-ASI"
PATENT_NOTICE = "Generated using Patent-Protected AI Algorithm Generation Technology"
LICENSE_CONTACT = os.getenv("LICENSE_CONTACT", "licensing@r3-asi-enterprise.com")

# ============================================================================
# Status endpoint
# ============================================================================

PLATFORM_STATUS = "TRANSCENDENT_OPERATIONAL"
PATENT_PROTECTION_STATUS = "FORTRESS_LEVEL_ACTIVE"

# ============================================================================
# Channel notices
# ============================================================================

WELCOME_MESSAGE = "Welcome to R³ ASI Enterprise Platform"
CAPABILITY_STATUS = "ASTRONOMICAL_BUSINESS_INTELLIGENCE_ACTIVE"
ANALYSIS_CONFIDENCE_LEVEL = 97.3

ANALYSIS_ERROR_MESSAGE = "Superintelligent processing temporarily limited"
ANALYSIS_ERROR_RECOMMENDATION = "Upgrade to Enterprise ASI for unlimited access"
CHANNEL_RATE_LIMIT_RECOMMENDATION = "Slow down and retry once the window resets"
CHANNEL_CAPACITY_MESSAGE = "Superintelligence channel is at capacity"
CHANNEL_CAPACITY_RECOMMENDATION = "Please try again later"

# ============================================================================
# HTTP fallbacks
# ============================================================================

CONSULTATION_ERROR_MESSAGE = "Superintelligent processing temporarily unavailable"
CONSULTATION_FALLBACK = "Contact ASI support for immediate assistance"
ALGORITHM_ERROR_MESSAGE = "Algorithm generation requires proper licensing"
RATE_LIMIT_MESSAGE = "Too many requests"
RATE_LIMIT_FALLBACK = "Retry after the indicated delay"
VALIDATION_FALLBACK = "Please fill in all fields for optimal superintelligent analysis"

__all__ = [
    "ASI_SIGNATURE",
    "CONSULTATION_SIGNATURE_PREFIX",
    "PATENT_NOTICE",
    "LICENSE_CONTACT",
    "PLATFORM_STATUS",
    "PATENT_PROTECTION_STATUS",
    "WELCOME_MESSAGE",
    "CAPABILITY_STATUS",
    "ANALYSIS_CONFIDENCE_LEVEL",
    "ANALYSIS_ERROR_MESSAGE",
    "ANALYSIS_ERROR_RECOMMENDATION",
    "CHANNEL_RATE_LIMIT_RECOMMENDATION",
    "CHANNEL_CAPACITY_MESSAGE",
    "CHANNEL_CAPACITY_RECOMMENDATION",
    "CONSULTATION_ERROR_MESSAGE",
    "CONSULTATION_FALLBACK",
    "ALGORITHM_ERROR_MESSAGE",
    "RATE_LIMIT_MESSAGE",
    "RATE_LIMIT_FALLBACK",
    "VALIDATION_FALLBACK",
]
