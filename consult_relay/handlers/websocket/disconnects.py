"""Recognize exceptions that only mean the peer went away."""

from __future__ import annotations

from fastapi import WebSocketDisconnect
from websockets.exceptions import ConnectionClosed
from anyio import EndOfStream, BrokenResourceError, ClosedResourceError

TRANSPORT_GONE: tuple[type[BaseException], ...] = (
    WebSocketDisconnect,
    ConnectionClosed,
    ConnectionResetError,
    BrokenPipeError,
    EOFError,
    BrokenResourceError,
    ClosedResourceError,
    EndOfStream,
)

# Starlette reports sends/receives on a closed socket as RuntimeError
CLOSED_SOCKET_PHRASES = (
    "websocket is not connected",
    "cannot call receive once a disconnect message has been received",
    'cannot call "send" once a close message has been sent',
    "unexpected asgi message 'websocket.send', after sending 'websocket.close'",
)


def is_expected_disconnect(exc: BaseException) -> bool:
    if isinstance(exc, TRANSPORT_GONE):
        return True
    if not isinstance(exc, RuntimeError):
        return False
    text = str(exc).lower()
    return any(phrase in text for phrase in CLOSED_SOCKET_PHRASES)


__all__ = ["is_expected_disconnect"]
