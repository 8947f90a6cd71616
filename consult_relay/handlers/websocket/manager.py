"""Primary WebSocket connection handler orchestration.

1. Connection Setup:
   - Session admission through the registry (capacity check)
   - Welcome notice with the current platform metrics
   - Idle watchdog and per-connection rate limiter

2. Message Routing (see message_loop.py):
   - Control messages: ping/pong/end
   - requestSuperintelligentAnalysis: handed to the push dispatcher

3. Cleanup:
   - Watchdog stopped, session removed from the registry

Removing the session is what makes any in-flight analysis for it drop
silently; production itself is not aborted.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import WebSocket

from ...logging import log_context
from .helpers import safe_send_json
from .message_loop import run_message_loop
from .lifecycle import WebSocketLifecycle
from .disconnects import is_expected_disconnect
from .errors import reject_connection
from ..limits import SlidingWindowRateLimiter
from ...errors import SessionCapacityError
from ...messages.payloads import welcome_frame
from ...telemetry import get_metrics, session_span
from ...config import WS_MAX_MESSAGES_PER_WINDOW, WS_MESSAGE_WINDOW_SECONDS
from ...config.websocket import WS_CLOSE_BUSY_CODE
from ...config.branding import CHANNEL_CAPACITY_MESSAGE, CHANNEL_CAPACITY_RECOMMENDATION

if TYPE_CHECKING:
    from ..services import Services

logger = logging.getLogger(__name__)


def _client_id(ws: WebSocket) -> str:
    client = ws.client
    return client.host if client and client.host else "-"


async def handle_websocket_connection(ws: WebSocket, services: Services) -> None:
    """Serve one channel connection from admission to teardown."""
    client_id = _client_id(ws)
    registry = services.registry

    try:
        session_id = await registry.create(ws, client_id=client_id)
    except SessionCapacityError:
        get_metrics().connections_rejected_total.add(1)
        await reject_connection(
            ws,
            error_code="server_at_capacity",
            message=CHANNEL_CAPACITY_MESSAGE,
            recommendation=CHANNEL_CAPACITY_RECOMMENDATION,
            close_code=WS_CLOSE_BUSY_CODE,
        )
        return

    lifecycle = WebSocketLifecycle(ws)
    limiter = SlidingWindowRateLimiter(
        limit=WS_MAX_MESSAGES_PER_WINDOW,
        window_seconds=WS_MESSAGE_WINDOW_SECONDS,
    )

    with log_context(session_id=session_id, client_id=client_id), session_span(
        session_id=session_id,
        client_id=client_id,
    ):
        try:
            await ws.accept()
            logger.info("ASI client connected")
            await safe_send_json(ws, welcome_frame(session_id, services.platform.snapshot()))
            lifecycle.start()
            await run_message_loop(ws, session_id, lifecycle, limiter, services.dispatcher)
        except Exception as exc:
            if is_expected_disconnect(exc):
                logger.info("ASI client disconnected")
            else:
                logger.exception("WebSocket error")
        finally:
            await lifecycle.stop()
            await registry.remove(session_id)


__all__ = ["handle_websocket_connection"]
