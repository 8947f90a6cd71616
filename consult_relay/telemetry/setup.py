"""Start and stop the OTel SDK providers.

Export goes to stdout only and is opt-in via ``OTEL_CONSOLE_EXPORT``. With
the flag off nothing is installed and the API's no-op providers stay active.
"""

from __future__ import annotations

import os
import socket
import logging

from opentelemetry import trace, metrics
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.metrics.export import ConsoleMetricExporter, PeriodicExportingMetricReader

from .instruments import initialize_metrics
from ..config.telemetry import (
    OTEL_SERVICE_NAME,
    OTEL_CONSOLE_EXPORT,
    OTEL_METRICS_EXPORT_INTERVAL_MS,
)

logger = logging.getLogger(__name__)

_providers: tuple[TracerProvider, MeterProvider] | None = None


def _resource() -> Resource:
    return Resource.create(
        {
            "service.name": OTEL_SERVICE_NAME,
            "host.name": socket.gethostname(),
            "process.pid": os.getpid(),
        }
    )


def init_telemetry() -> None:
    """Install console span and metric exporters once per process."""
    global _providers
    if _providers is not None:
        return
    if not OTEL_CONSOLE_EXPORT:
        logger.info("telemetry export off; set OTEL_CONSOLE_EXPORT=1 to print spans and metrics")
        return

    resource = _resource()
    tracer_provider = TracerProvider(resource=resource)
    tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    meter_provider = MeterProvider(
        resource=resource,
        metric_readers=[
            PeriodicExportingMetricReader(
                ConsoleMetricExporter(),
                export_interval_millis=OTEL_METRICS_EXPORT_INTERVAL_MS,
            )
        ],
    )
    trace.set_tracer_provider(tracer_provider)
    metrics.set_meter_provider(meter_provider)
    _providers = (tracer_provider, meter_provider)

    initialize_metrics()
    logger.info("telemetry exporting to console for service %s", OTEL_SERVICE_NAME)


def shutdown_telemetry() -> None:
    global _providers
    if _providers is None:
        return
    for provider in _providers:
        provider.force_flush()
        provider.shutdown()
    _providers = None


__all__ = ["init_telemetry", "shutdown_telemetry"]
