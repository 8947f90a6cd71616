"""Push channel dispatcher for asynchronous analysis results.

Delivery contract:
    - A request is accepted only while its session resolves as CONNECTED.
    - Production runs in an independent task; the dispatcher keeps only the
      session id across the await and re-resolves before sending.
    - If the session is gone by then, the push is dropped. There is no
      retry and no backlog (at-most-once, best effort).
    - Producer failure or timeout becomes an ``asiError`` frame on the same
      channel, subject to the same drop rule.

Every frame echoes the request's ``request_id`` so a client issuing
concurrent requests can match results to requests.
"""

from __future__ import annotations

import time
import uuid
import asyncio
import logging
from typing import Any

from .registry import SessionRegistry
from ..logging import log_context
from ..state.limits import DeliveryOutcome
from ..state.analysis import AnalysisResult
from ..producers.base import ResultProducer
from .websocket.helpers import safe_send_json
from ..telemetry import analysis_span, get_metrics
from ..config.limits import ANALYSIS_TIMEOUT_S
from ..messages.payloads import insights_frame, asi_error_frame
from ..config.branding import ANALYSIS_ERROR_MESSAGE, ANALYSIS_ERROR_RECOMMENDATION

logger = logging.getLogger(__name__)


def new_request_id() -> str:
    return f"analysis-{uuid.uuid4().hex[:12]}"


class PushDispatcher:
    """Schedules analysis production and delivers the outcome to a session."""

    def __init__(
        self,
        registry: SessionRegistry,
        producer: ResultProducer,
        *,
        timeout_s: float = ANALYSIS_TIMEOUT_S,
    ):
        self._registry = registry
        self._producer = producer
        self._timeout_s = max(0.0, float(timeout_s))
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending_count(self) -> int:
        return len(self._tasks)

    def request_analysis(
        self,
        session_id: str,
        business_data: Any,
        request_id: str | None = None,
    ) -> asyncio.Task | None:
        """Schedule production for a live session.

        Returns:
            The production task, or None when the session is not connected.
        """
        if self._registry.resolve(session_id) is None:
            logger.info("analysis request ignored: session %s not connected", session_id)
            return None
        request_id = request_id or new_request_id()
        task = asyncio.create_task(
            self._run(session_id, business_data, request_id),
            name=f"analysis:{request_id}",
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def deliver(self, session_id: str, payload: dict[str, Any]) -> DeliveryOutcome:
        """Send ``payload`` to the session if it is still live. Never raises."""
        outcome = await self._send(session_id, payload)
        get_metrics().deliveries_total.add(1, {"outcome": outcome.value})
        return outcome

    async def shutdown(self) -> None:
        """Cancel pending production tasks and wait for them to finish."""
        tasks = list(self._tasks)
        if not tasks:
            return
        logger.info("dispatcher: cancelling %s pending analyses", len(tasks))
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()

    async def _run(self, session_id: str, business_data: Any, request_id: str) -> DeliveryOutcome:
        with log_context(session_id=session_id, request_id=request_id), analysis_span(
            session_id=session_id,
            request_id=request_id,
        ):
            frame = await self._produce(business_data, request_id)
            outcome = await self.deliver(session_id, frame)
            logger.info("analysis %s %s", request_id, outcome.value)
            return outcome

    async def _produce(self, business_data: Any, request_id: str) -> dict[str, Any]:
        metrics = get_metrics()
        start = time.perf_counter()
        try:
            pending = self._producer.analyze(business_data)
            if self._timeout_s > 0:
                analysis = await asyncio.wait_for(pending, timeout=self._timeout_s)
            else:
                analysis = await pending
            if not isinstance(analysis, AnalysisResult):
                raise TypeError(f"producer returned {type(analysis).__name__}")
            elapsed = time.perf_counter() - start
            # Rendering validates the result; a bad value is a production failure
            frame = insights_frame(analysis, request_id=request_id, elapsed_s=elapsed)
        except asyncio.TimeoutError:
            logger.warning("analysis timed out after %.1fs", self._timeout_s)
            metrics.errors_total.add(1, {"route": "analysis", "category": "timeout"})
            return self._error_frame("analysis_timeout", request_id)
        except Exception:
            logger.exception("analysis production failed")
            metrics.errors_total.add(1, {"route": "analysis", "category": "internal"})
            return self._error_frame("analysis_failed", request_id)

        metrics.analysis_latency.record(elapsed)
        return frame

    async def _send(self, session_id: str, payload: dict[str, Any]) -> DeliveryOutcome:
        session = self._registry.resolve(session_id)
        if session is None:
            logger.info("delivery dropped: session %s no longer connected", session_id)
            return DeliveryOutcome.DROPPED
        try:
            sent = await safe_send_json(session.channel, payload)
        except Exception:
            logger.exception("delivery failed for session %s", session_id)
            return DeliveryOutcome.DROPPED
        if not sent:
            return DeliveryOutcome.DROPPED
        return DeliveryOutcome.DELIVERED

    @staticmethod
    def _error_frame(error_code: str, request_id: str) -> dict[str, Any]:
        return asi_error_frame(
            error=ANALYSIS_ERROR_MESSAGE,
            recommendation=ANALYSIS_ERROR_RECOMMENDATION,
            error_code=error_code,
            request_id=request_id,
        )


__all__ = ["PushDispatcher", "new_request_id"]
