"""State dataclasses shared across handlers."""

from .limits import DeliveryOutcome, RateLimitWindow
from .session import Session, SessionStatus
from .analysis import AnalysisResult, AlgorithmRequest, AlgorithmBlueprint
from .platform import PlatformMetrics
from .consultation import (
    CompanySize,
    ClientContext,
    ConsultationResult,
    ConsultationRequest,
)

__all__ = [
    "AlgorithmBlueprint",
    "AlgorithmRequest",
    "AnalysisResult",
    "ClientContext",
    "CompanySize",
    "ConsultationRequest",
    "ConsultationResult",
    "DeliveryOutcome",
    "PlatformMetrics",
    "RateLimitWindow",
    "Session",
    "SessionStatus",
]
