"""Public telemetry API: re-exports for convenience."""

from .setup import init_telemetry, shutdown_telemetry
from .traces import request_span, session_span, analysis_span
from .instruments import get_metrics, initialize_metrics

__all__ = [
    "init_telemetry",
    "shutdown_telemetry",
    "get_metrics",
    "initialize_metrics",
    "session_span",
    "request_span",
    "analysis_span",
]
