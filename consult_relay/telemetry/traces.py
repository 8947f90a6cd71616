"""Span context managers for session, request, and analysis tracing."""

from __future__ import annotations

from typing import Any
from opentelemetry import trace
from collections.abc import Iterator
from contextlib import contextmanager
from ..config.telemetry import SPAN_REQUEST, SPAN_SESSION, SPAN_ANALYSIS, OTEL_SERVICE_NAME


def _tracer() -> trace.Tracer:
    return trace.get_tracer(OTEL_SERVICE_NAME)


@contextmanager
def session_span(*, session_id: str, client_id: str) -> Iterator[trace.Span]:
    """Outermost span wrapping the entire channel connection."""
    with _tracer().start_as_current_span(
        SPAN_SESSION,
        attributes={"session.id": session_id, "client.id": client_id},
    ) as span:
        yield span


@contextmanager
def request_span(*, route: str, client_id: str = "") -> Iterator[trace.Span]:
    """Per-HTTP-request span."""
    attrs: dict[str, Any] = {"http.route": route}
    if client_id:
        attrs["client.id"] = client_id
    with _tracer().start_as_current_span(SPAN_REQUEST, attributes=attrs) as span:
        yield span


@contextmanager
def analysis_span(*, session_id: str, request_id: str) -> Iterator[trace.Span]:
    """Asynchronous analysis production span."""
    with _tracer().start_as_current_span(
        SPAN_ANALYSIS,
        attributes={"session.id": session_id, "request.id": request_id},
    ) as span:
        yield span


__all__ = ["session_span", "request_span", "analysis_span"]
