"""Telemetry configuration: env vars, metric specs, span names."""

import os

from ..utils.env import env_flag

# ---------------------------------------------------------------------------
# OTel
# ---------------------------------------------------------------------------
OTEL_SERVICE_NAME: str = os.getenv("OTEL_SERVICE_NAME", "consult-relay")
OTEL_CONSOLE_EXPORT: bool = env_flag("OTEL_CONSOLE_EXPORT", False)
OTEL_METRICS_EXPORT_INTERVAL_MS: int = int(os.getenv("OTEL_METRICS_EXPORT_INTERVAL_MS", "15000"))

# ---------------------------------------------------------------------------
# Metric spec tuples: (name, unit, description)
# ---------------------------------------------------------------------------

# Histograms
METRIC_REQUEST_LATENCY = ("consult_relay.request_latency", "s", "HTTP consultation latency")
METRIC_ANALYSIS_LATENCY = ("consult_relay.analysis_latency", "s", "Channel analysis production time")

# Counters
METRIC_REQUESTS_TOTAL = ("consult_relay.requests_total", "{request}", "Total HTTP API requests")
METRIC_ERRORS_TOTAL = ("consult_relay.errors_total", "{error}", "Failures by category")
METRIC_RATE_LIMIT_VIOLATIONS_TOTAL = (
    "consult_relay.rate_limit_violations_total",
    "{violation}",
    "Rejected admissions",
)
METRIC_SESSIONS_TOTAL = ("consult_relay.sessions_total", "{session}", "Opened channel sessions")
METRIC_DELIVERIES_TOTAL = ("consult_relay.deliveries_total", "{message}", "Push deliveries by outcome")
METRIC_CONNECTIONS_REJECTED_TOTAL = (
    "consult_relay.connections_rejected_total",
    "{connection}",
    "Channels rejected at capacity",
)

# UpDown counters
METRIC_ACTIVE_SESSIONS = ("consult_relay.active_sessions", "{session}", "Currently connected sessions")

# ---------------------------------------------------------------------------
# Span names
# ---------------------------------------------------------------------------
SPAN_SESSION = "consult_relay.session"
SPAN_REQUEST = "consult_relay.request"
SPAN_ANALYSIS = "consult_relay.analysis"

__all__ = [
    "OTEL_SERVICE_NAME",
    "OTEL_CONSOLE_EXPORT",
    "OTEL_METRICS_EXPORT_INTERVAL_MS",
    "METRIC_REQUEST_LATENCY",
    "METRIC_ANALYSIS_LATENCY",
    "METRIC_REQUESTS_TOTAL",
    "METRIC_ERRORS_TOTAL",
    "METRIC_RATE_LIMIT_VIOLATIONS_TOTAL",
    "METRIC_SESSIONS_TOTAL",
    "METRIC_DELIVERIES_TOTAL",
    "METRIC_CONNECTIONS_REJECTED_TOTAL",
    "METRIC_ACTIVE_SESSIONS",
    "SPAN_SESSION",
    "SPAN_REQUEST",
    "SPAN_ANALYSIS",
]
