"""OTel instruments used across the server.

Instruments are built lazily from the metric specs in ``config.telemetry``.
Until ``init_telemetry`` installs a real provider they bind to the API's
no-op meter, so handlers can record unconditionally.
"""

from __future__ import annotations

import logging

from opentelemetry import metrics

from ..config.telemetry import (
    OTEL_SERVICE_NAME,
    METRIC_ERRORS_TOTAL,
    METRIC_SESSIONS_TOTAL,
    METRIC_REQUESTS_TOTAL,
    METRIC_ACTIVE_SESSIONS,
    METRIC_REQUEST_LATENCY,
    METRIC_ANALYSIS_LATENCY,
    METRIC_DELIVERIES_TOTAL,
    METRIC_CONNECTIONS_REJECTED_TOTAL,
    METRIC_RATE_LIMIT_VIOLATIONS_TOTAL,
)

logger = logging.getLogger(__name__)

# attribute -> (meter factory method, metric spec)
_LAYOUT: dict[str, tuple[str, tuple[str, str, str]]] = {
    "request_latency": ("create_histogram", METRIC_REQUEST_LATENCY),
    "analysis_latency": ("create_histogram", METRIC_ANALYSIS_LATENCY),
    "requests_total": ("create_counter", METRIC_REQUESTS_TOTAL),
    "errors_total": ("create_counter", METRIC_ERRORS_TOTAL),
    "rate_limit_violations_total": ("create_counter", METRIC_RATE_LIMIT_VIOLATIONS_TOTAL),
    "sessions_total": ("create_counter", METRIC_SESSIONS_TOTAL),
    "deliveries_total": ("create_counter", METRIC_DELIVERIES_TOTAL),
    "connections_rejected_total": ("create_counter", METRIC_CONNECTIONS_REJECTED_TOTAL),
    "active_sessions": ("create_up_down_counter", METRIC_ACTIVE_SESSIONS),
}


class MetricInstruments:
    """One attribute per instrument named in ``_LAYOUT``."""

    __slots__ = tuple(_LAYOUT)

    request_latency: metrics.Histogram
    analysis_latency: metrics.Histogram
    requests_total: metrics.Counter
    errors_total: metrics.Counter
    rate_limit_violations_total: metrics.Counter
    sessions_total: metrics.Counter
    deliveries_total: metrics.Counter
    connections_rejected_total: metrics.Counter
    active_sessions: metrics.UpDownCounter

    def __init__(self, meter: metrics.Meter) -> None:
        for attr, (factory, (name, unit, description)) in _LAYOUT.items():
            instrument = getattr(meter, factory)(name, unit=unit, description=description)
            setattr(self, attr, instrument)


_current: MetricInstruments | None = None


def _build() -> MetricInstruments:
    return MetricInstruments(metrics.get_meter(OTEL_SERVICE_NAME))


def get_metrics() -> MetricInstruments:
    global _current
    if _current is None:
        _current = _build()
    return _current


def initialize_metrics() -> None:
    """Rebind every instrument to the meter provider installed right now."""
    global _current
    _current = _build()
    logger.info("metric instruments bound to %s", type(metrics.get_meter_provider()).__name__)


__all__ = ["MetricInstruments", "get_metrics", "initialize_metrics"]
