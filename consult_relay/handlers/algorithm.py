"""Algorithm generation handler.

Same admission and validation flow as consultations; producer failures
surface as InternalProcessingError with the licensing message.
"""

from __future__ import annotations

import time
import logging
from typing import Any

from .admission import admit
from ..errors import InternalProcessingError
from .keyed_limits import KeyedRateLimiter
from ..producers.base import ResultProducer
from ..state.analysis import AlgorithmBlueprint
from ..telemetry.instruments import get_metrics
from ..config.branding import ALGORITHM_ERROR_MESSAGE
from ..messages.validators import parse_algorithm_request

logger = logging.getLogger(__name__)

ROUTE = "algorithm_generation"


class AlgorithmDesigner:
    """Validates algorithm requests and returns generated blueprints."""

    def __init__(self, limiter: KeyedRateLimiter, producer: ResultProducer):
        self._limiter = limiter
        self._producer = producer

    async def handle(self, body: Any, client_key: str) -> AlgorithmBlueprint:
        admit(self._limiter, client_key, route=ROUTE)
        request = parse_algorithm_request(body)

        start = time.perf_counter()
        try:
            blueprint = await self._producer.design_algorithm(request)
            if not isinstance(blueprint, AlgorithmBlueprint):
                raise TypeError(f"producer returned {type(blueprint).__name__}")
        except Exception as exc:
            logger.exception("algorithm generation failed domain=%s", request.domain_type)
            get_metrics().errors_total.add(1, {"route": ROUTE, "category": "internal"})
            raise InternalProcessingError(ALGORITHM_ERROR_MESSAGE, fallback=None) from exc

        get_metrics().request_latency.record(time.perf_counter() - start, {"route": ROUTE})
        logger.info("algorithm generated steps=%s", len(blueprint.implementation_steps))
        return blueprint


__all__ = ["AlgorithmDesigner"]
