"""Receive loop for one channel session: parse, admit, dispatch."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from typing import TYPE_CHECKING, Any

from .errors import send_error
from .helpers import safe_send_json
from .parser import parse_client_message
from .lifecycle import WebSocketLifecycle
from ..limits import SlidingWindowRateLimiter
from ...errors import RateLimitError, ValidationError
from ...logging import log_context
from ...messages.payloads import pong_frame
from ...telemetry.instruments import get_metrics
from ...messages.validators import parse_analysis_message
from ...config.branding import CHANNEL_RATE_LIMIT_RECOMMENDATION
from ...config.websocket import (
    WS_CONTROL_MESSAGES,
    WS_MSG_REQUEST_ANALYSIS,
    WS_CLOSE_CLIENT_REQUEST_CODE,
)

if TYPE_CHECKING:
    from ..dispatcher import PushDispatcher

logger = logging.getLogger(__name__)


async def _handle_control_message(ws: Any, msg_type: str, request_id: str | None) -> bool:
    """Answer ping, honor end; True means the loop should stop."""
    if msg_type == "ping":
        await safe_send_json(ws, pong_frame(request_id))
        return False
    if msg_type == "end":
        logger.info("WS recv: end")
        with contextlib.suppress(Exception):
            await ws.close(code=WS_CLOSE_CLIENT_REQUEST_CODE)
        return True
    return False


async def _recv_text_with_watchdog(ws: Any, lifecycle: WebSocketLifecycle) -> tuple[str | None, bool]:
    try:
        message = await asyncio.wait_for(
            ws.receive_text(),
            timeout=lifecycle.watchdog_tick_s * 2,
        )
        return message, False
    except asyncio.TimeoutError:
        return None, lifecycle.should_close()


async def _parse_message_or_send_error(ws: Any, raw_msg: str) -> dict[str, Any] | None:
    try:
        return parse_client_message(raw_msg)
    except ValueError as exc:
        await send_error(ws, error_code="invalid_message", message=str(exc))
        return None


async def _consume_limiter(
    ws: Any,
    limiter: SlidingWindowRateLimiter,
    request_id: str | None,
) -> bool:
    """Charge the per-connection budget, sending an error on rejection."""
    try:
        limiter.consume()
    except RateLimitError as err:
        retry_in = err.retry_after_seconds
        get_metrics().rate_limit_violations_total.add(1, {"surface": "channel"})
        message = (
            f"message rate limit: at most {err.limit} per "
            f"{int(err.window_seconds)} seconds; retry in {retry_in} seconds"
        )
        await send_error(
            ws,
            error_code="message_rate_limited",
            message=message,
            recommendation=CHANNEL_RATE_LIMIT_RECOMMENDATION,
            request_id=request_id,
            extra={"retry_in": retry_in},
        )
        return False
    return True


async def _handle_analysis_request(
    ws: Any,
    msg: dict[str, Any],
    session_id: str,
    request_id: str | None,
    dispatcher: PushDispatcher,
) -> None:
    try:
        business_data = parse_analysis_message(msg)
    except ValidationError as err:
        await send_error(ws, error_code=err.error_code, message=err.message, request_id=request_id)
        return
    logger.info("WS recv: %s", WS_MSG_REQUEST_ANALYSIS)
    dispatcher.request_analysis(session_id, business_data, request_id)


async def run_message_loop(
    ws: Any,
    session_id: str,
    lifecycle: WebSocketLifecycle,
    limiter: SlidingWindowRateLimiter,
    dispatcher: PushDispatcher,
) -> None:
    """Receive, validate, and dispatch client frames until close."""
    while True:
        raw_msg, should_close = await _recv_text_with_watchdog(ws, lifecycle)
        if raw_msg is None:
            if should_close:
                break
            continue

        lifecycle.touch()
        msg = await _parse_message_or_send_error(ws, raw_msg)
        if msg is None:
            continue

        msg_type = msg["type"]
        request_id = msg["request_id"]

        with log_context(request_id=request_id):
            if msg_type in WS_CONTROL_MESSAGES:
                if await _handle_control_message(ws, msg_type, request_id):
                    break
                continue
            if not await _consume_limiter(ws, limiter, request_id):
                continue
            if msg_type == WS_MSG_REQUEST_ANALYSIS:
                await _handle_analysis_request(ws, msg, session_id, request_id, dispatcher)
                continue
            await send_error(
                ws,
                error_code="unknown_message_type",
                message=f"Message type '{msg_type}' is not supported.",
                request_id=request_id,
            )


__all__ = ["run_message_loop"]
