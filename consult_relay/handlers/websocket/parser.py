"""Client frame parsing for the WebSocket handler."""

from __future__ import annotations

from typing import Any

import orjson

from ...config.limits import CHANNEL_MESSAGE_MAX_CHARS
from ...config.websocket import WS_END_SENTINEL


def parse_client_message(raw: str) -> dict[str, Any]:
    """Decode one client text frame into a dict with a ``type`` field.

    The bare ``__END__`` sentinel is accepted in place of ``{"type": "end"}``.

    Raises:
        ValueError: Empty, oversized, non-JSON or non-object frames, or a
            frame without a ``type``.
    """
    text = (raw or "").strip()
    if not text:
        raise ValueError("Empty message.")
    if text == WS_END_SENTINEL:
        return {"type": "end"}
    if len(text) > CHANNEL_MESSAGE_MAX_CHARS:
        raise ValueError(f"Message exceeds {CHANNEL_MESSAGE_MAX_CHARS} characters.")

    try:
        data = orjson.loads(text)
    except orjson.JSONDecodeError as exc:
        raise ValueError("Message must be valid JSON or a sentinel string.") from exc

    if not isinstance(data, dict):
        raise ValueError("Message must be a JSON object.")

    msg_type = data.get("type")
    if not isinstance(msg_type, str) or not msg_type.strip():
        if bool(data.get("end")):
            msg_type = "end"
        else:
            raise ValueError("Missing 'type' in message.")

    data["type"] = msg_type.strip()
    request_id = data.get("request_id")
    if request_id is None or (isinstance(request_id, str) and not request_id.strip()):
        data["request_id"] = None
    else:
        data["request_id"] = str(request_id).strip()
    return data


__all__ = ["parse_client_message"]
