"""Shared response helpers for channel error handling.

Every error notice is an ``asiError`` frame:

    {
        "type": "asiError",
        "error": "Human-readable description",
        "recommendation": "What the client should do next",
        "error_code": "message_rate_limited",   # Machine-readable code
        "request_id": "...",                    # When the failing frame had one
        ...extra fields
    }

Error codes used on the channel:
    - server_at_capacity: Session limit reached (connection then closed)
    - invalid_message: Malformed JSON or missing type
    - unknown_message_type: Unrecognized message type
    - message_rate_limited: Too many analysis requests per window
    - missing_business_data: Analysis request without businessData
    - analysis_failed / analysis_timeout: Result production failed
"""

from __future__ import annotations

import logging
import contextlib
from typing import Any

from .helpers import safe_send_json
from ...messages.payloads import asi_error_frame
from ...config.branding import VALIDATION_FALLBACK

logger = logging.getLogger(__name__)


async def send_error(
    ws: Any,
    *,
    error_code: str,
    message: str,
    recommendation: str = VALIDATION_FALLBACK,
    request_id: str | None = None,
    extra: dict[str, Any] | None = None,
) -> bool:
    """Send an ``asiError`` frame; returns False if the client is gone."""
    frame = asi_error_frame(
        error=message,
        recommendation=recommendation,
        error_code=error_code,
        request_id=request_id,
        extra=extra,
    )
    return await safe_send_json(ws, frame)


async def reject_connection(
    ws: Any,
    *,
    error_code: str,
    message: str,
    recommendation: str,
    close_code: int,
) -> None:
    """Accept the connection briefly to send an error, then close it.

    The client receives a meaningful notice instead of a bare close code.
    """
    try:
        await ws.accept()
        await send_error(
            ws,
            error_code=error_code,
            message=message,
            recommendation=recommendation,
        )
    finally:
        with contextlib.suppress(Exception):
            await ws.close(code=close_code)


__all__ = ["send_error", "reject_connection"]
