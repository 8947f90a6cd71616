"""Consultation request handler.

Order of operations per request:

1. Admission: one charge against the caller's rate limit budget
2. Validation: raw body -> ConsultationRequest (ValidationError on failure)
3. Production: the result producer fabricates a ConsultationResult
4. Bounding: certainty clamped to [0, 100], value to a non-negative int

A rejected admission never reaches the producer. Any producer failure is
logged with its traceback and replaced by InternalProcessingError, whose
message is safe to show to the client.
"""

from __future__ import annotations

import time
import logging
from typing import Any

from .admission import admit
from ..errors import InternalProcessingError
from .keyed_limits import KeyedRateLimiter
from ..producers.base import ResultProducer
from ..telemetry.instruments import get_metrics
from ..state.consultation import ConsultationResult
from ..messages.validators import parse_consultation_request
from ..config.branding import CONSULTATION_FALLBACK, CONSULTATION_ERROR_MESSAGE

logger = logging.getLogger(__name__)

ROUTE = "consultation"


class ConsultationHandler:
    """Validates consultation requests and returns bounded results."""

    def __init__(self, limiter: KeyedRateLimiter, producer: ResultProducer):
        self._limiter = limiter
        self._producer = producer

    async def handle(self, body: Any, client_key: str) -> ConsultationResult:
        """Run one consultation request end to end.

        Raises:
            RateLimitError: The client exhausted its admission budget.
            ValidationError: The body is malformed or incomplete.
            InternalProcessingError: Result production failed.
        """
        admit(self._limiter, client_key, route=ROUTE)
        request = parse_consultation_request(body)

        start = time.perf_counter()
        try:
            result = await self._producer.consult(request)
            bounded = result.bounded()
        except Exception as exc:
            logger.exception("consultation production failed industry=%s", request.context.industry)
            get_metrics().errors_total.add(1, {"route": ROUTE, "category": "internal"})
            raise InternalProcessingError(
                CONSULTATION_ERROR_MESSAGE,
                CONSULTATION_FALLBACK,
            ) from exc

        get_metrics().request_latency.record(time.perf_counter() - start, {"route": ROUTE})
        logger.info(
            "consultation produced value=%s certainty=%.1f tier=%s",
            bounded.value,
            bounded.certainty,
            request.tier,
        )
        return bounded


__all__ = ["ConsultationHandler"]
