"""Safe send helpers for channel frames.

Frames are serialized with orjson. A send that fails because the peer went
away returns False instead of raising, so callers can treat the push as
dropped. Any other failure propagates.
"""

from __future__ import annotations

import logging
from typing import Any

import orjson

from .disconnects import is_expected_disconnect

logger = logging.getLogger(__name__)


def encode_frame(payload: dict[str, Any]) -> str:
    return orjson.dumps(payload).decode("utf-8")


async def safe_send_text(ws: Any, text: str) -> bool:
    """Send text to the client, returning False if the socket is gone.

    Args:
        ws: The WebSocket connection (anything with ``send_text``).
        text: Raw text to send.

    Returns:
        True if sent successfully, False if client disconnected.
    """
    try:
        await ws.send_text(text)
    except Exception as exc:
        if not is_expected_disconnect(exc):
            raise
        logger.info("WebSocket disconnected while sending %s bytes", len(text))
        return False
    return True


async def safe_send_json(ws: Any, payload: dict[str, Any]) -> bool:
    """Send a JSON frame, swallowing client disconnects."""
    return await safe_send_text(ws, encode_frame(payload))


__all__ = ["encode_frame", "safe_send_text", "safe_send_json"]
