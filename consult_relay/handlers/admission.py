"""Shared HTTP admission step: count the request, then charge the limiter."""

from __future__ import annotations

import logging

from ..errors import RateLimitError
from .keyed_limits import KeyedRateLimiter
from ..telemetry.instruments import get_metrics

logger = logging.getLogger(__name__)


def admit(limiter: KeyedRateLimiter, client_key: str, *, route: str) -> None:
    """Charge one admission to ``client_key``; re-raises RateLimitError."""
    metrics = get_metrics()
    metrics.requests_total.add(1, {"route": route})
    try:
        limiter.consume(client_key)
    except RateLimitError as err:
        metrics.rate_limit_violations_total.add(1, {"surface": "http", "route": route})
        logger.info("rate limited route=%s retry_in=%.1fs", route, err.retry_in)
        raise


__all__ = ["admit"]
