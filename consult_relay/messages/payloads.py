"""Builders for every JSON body and channel frame the server emits.

HTTP bodies:
    consultation_body   {success, consultation, timestamp, asiSignature, patentProtected}
    algorithm_body      {success, algorithm, patentNotice, licenseRequired, contactInfo}
    status_body         platform metrics + status + patentProtection
    failure_body        {success: false, error, ...}

Channel frames (all carry ``type``):
    asiWelcome, superintelligentInsights, asiError, pong
"""

from __future__ import annotations

from typing import Any

from ..utils.time_utils import iso_timestamp
from ..state.platform import PlatformMetrics
from ..state.consultation import ConsultationResult
from ..state.analysis import AnalysisResult, AlgorithmBlueprint
from ..config.websocket import WS_MSG_ERROR, WS_MSG_WELCOME, WS_MSG_INSIGHTS
from ..config.branding import (
    ASI_SIGNATURE,
    PATENT_NOTICE,
    LICENSE_CONTACT,
    PLATFORM_STATUS,
    WELCOME_MESSAGE,
    CAPABILITY_STATUS,
    PATENT_PROTECTION_STATUS,
    ANALYSIS_CONFIDENCE_LEVEL,
)


def format_currency(value: int) -> str:
    """Render whole currency units like ``$1,234,567``."""
    return f"${max(0, int(value)):,}"


def format_processing_time(elapsed_s: float) -> str:
    return f"{max(0.0, elapsed_s):.3f} seconds"


# ============================================================================
# HTTP bodies
# ============================================================================


def consultation_body(result: ConsultationResult) -> dict[str, Any]:
    return {
        "success": True,
        "consultation": {
            "consultationValue": result.value,
            "strategicInsights": result.insights,
            "implementationPlan": result.roadmap,
            "projectedROI": result.roi,
            "certaintyLevel": result.certainty,
            "superintelligenceSignature": result.signature,
        },
        "timestamp": iso_timestamp(),
        "asiSignature": ASI_SIGNATURE,
        "patentProtected": True,
    }


def algorithm_body(blueprint: AlgorithmBlueprint) -> dict[str, Any]:
    return {
        "success": True,
        "algorithm": blueprint.as_payload(),
        "patentNotice": PATENT_NOTICE,
        "licenseRequired": True,
        "contactInfo": LICENSE_CONTACT,
    }


def status_body(metrics: PlatformMetrics) -> dict[str, Any]:
    body: dict[str, Any] = metrics.as_payload()
    body["status"] = PLATFORM_STATUS
    body["patentProtection"] = PATENT_PROTECTION_STATUS
    return body


def failure_body(
    error: str,
    *,
    fallback: str | None = None,
    error_code: str | None = None,
    retry_after: int | None = None,
) -> dict[str, Any]:
    """Build a ``success: false`` body; optional fields are omitted when None."""
    body: dict[str, Any] = {"success": False, "error": error}
    if error_code is not None:
        body["error_code"] = error_code
    if fallback is not None:
        body["fallbackRecommendation"] = fallback
    if retry_after is not None:
        body["retryAfter"] = retry_after
    return body


# ============================================================================
# Channel frames
# ============================================================================


def welcome_frame(session_id: str, metrics: PlatformMetrics) -> dict[str, Any]:
    return {
        "type": WS_MSG_WELCOME,
        "message": WELCOME_MESSAGE,
        "session_id": session_id,
        "superintelligenceLevel": round(metrics.superintelligence_level, 2),
        "capabilityStatus": CAPABILITY_STATUS,
        "platform": metrics.as_payload(),
    }


def insights_frame(
    analysis: AnalysisResult,
    *,
    request_id: str,
    elapsed_s: float,
) -> dict[str, Any]:
    payload = analysis.as_payload()
    return {
        "type": WS_MSG_INSIGHTS,
        "request_id": request_id,
        "analysis": payload,
        "confidenceLevel": ANALYSIS_CONFIDENCE_LEVEL,
        "processingTime": format_processing_time(elapsed_s),
        "valueGenerated": format_currency(payload["estimatedValue"]),
    }


def asi_error_frame(
    *,
    error: str,
    recommendation: str,
    error_code: str,
    request_id: str | None = None,
    extra: dict[str, Any] | None = None,
) -> dict[str, Any]:
    frame: dict[str, Any] = {
        "type": WS_MSG_ERROR,
        "error": error,
        "recommendation": recommendation,
        "error_code": error_code,
    }
    if request_id:
        frame["request_id"] = request_id
    if extra:
        frame.update(extra)
    return frame


def pong_frame(request_id: str | None = None) -> dict[str, Any]:
    frame: dict[str, Any] = {"type": "pong"}
    if request_id:
        frame["request_id"] = request_id
    return frame


__all__ = [
    "format_currency",
    "format_processing_time",
    "consultation_body",
    "algorithm_body",
    "status_body",
    "failure_body",
    "welcome_frame",
    "insights_frame",
    "asi_error_frame",
    "pong_frame",
]
