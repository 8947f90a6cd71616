"""Assembly point for the per-application handler graph.

Singletons are built here rather than next to their classes. Each FastAPI
app owns one Services instance (``app.state.services``) so tests can build
isolated apps with fakes.
"""

from __future__ import annotations

from dataclasses import dataclass

from .platform import PlatformState
from .registry import SessionRegistry
from .algorithm import AlgorithmDesigner
from .dispatcher import PushDispatcher
from .keyed_limits import KeyedRateLimiter
from .consultation import ConsultationHandler
from ..producers.base import ResultProducer
from ..producers.synthetic import SyntheticResultProducer


@dataclass
class Services:
    """Everything a request or channel handler needs."""

    platform: PlatformState
    registry: SessionRegistry
    limiter: KeyedRateLimiter
    producer: ResultProducer
    consultation: ConsultationHandler
    algorithm: AlgorithmDesigner
    dispatcher: PushDispatcher


def build_services(
    *,
    producer: ResultProducer | None = None,
    platform: PlatformState | None = None,
    registry: SessionRegistry | None = None,
    limiter: KeyedRateLimiter | None = None,
    dispatcher: PushDispatcher | None = None,
) -> Services:
    """Wire handlers together; any component may be overridden."""
    platform = platform or PlatformState()
    producer = producer or SyntheticResultProducer(platform)
    registry = registry or SessionRegistry()
    limiter = limiter or KeyedRateLimiter()
    return Services(
        platform=platform,
        registry=registry,
        limiter=limiter,
        producer=producer,
        consultation=ConsultationHandler(limiter, producer),
        algorithm=AlgorithmDesigner(limiter, producer),
        dispatcher=dispatcher or PushDispatcher(registry, producer),
    )


__all__ = ["Services", "build_services"]
