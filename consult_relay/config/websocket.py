"""Channel (``/ws``) settings: idle policy, close codes, frame types.

Close codes follow RFC 6455 where one fits (1000 client asked to end,
1013 no free session slot) and use the 4000 private range for idle closes.
"""

from __future__ import annotations

import os

# Idle policy and slot acquisition (seconds); an idle timeout of 0 disables it
WS_IDLE_TIMEOUT_S = float(os.getenv("WS_IDLE_TIMEOUT_S", "150"))
WS_WATCHDOG_TICK_S = float(os.getenv("WS_WATCHDOG_TICK_S", "5"))
WS_HANDSHAKE_ACQUIRE_TIMEOUT_S = float(os.getenv("WS_HANDSHAKE_ACQUIRE_TIMEOUT_S", "0.5"))

WS_CLOSE_CLIENT_REQUEST_CODE = 1000
WS_CLOSE_BUSY_CODE = 1013
WS_CLOSE_IDLE_CODE = int(os.getenv("WS_CLOSE_IDLE_CODE", "4000"))
WS_CLOSE_IDLE_REASON = "idle_timeout"

# Frame "type" values
WS_MSG_WELCOME = "asiWelcome"
WS_MSG_REQUEST_ANALYSIS = "requestSuperintelligentAnalysis"
WS_MSG_INSIGHTS = "superintelligentInsights"
WS_MSG_ERROR = "asiError"

# Not charged against the per-connection message budget
WS_CONTROL_MESSAGES = frozenset({"ping", "pong", "end"})

# Raw text frame that ends the session like {"type": "end"}
WS_END_SENTINEL = "__END__"

__all__ = [
    "WS_IDLE_TIMEOUT_S",
    "WS_WATCHDOG_TICK_S",
    "WS_HANDSHAKE_ACQUIRE_TIMEOUT_S",
    "WS_CLOSE_BUSY_CODE",
    "WS_CLOSE_IDLE_CODE",
    "WS_CLOSE_IDLE_REASON",
    "WS_CLOSE_CLIENT_REQUEST_CODE",
    "WS_MSG_REQUEST_ANALYSIS",
    "WS_MSG_WELCOME",
    "WS_MSG_INSIGHTS",
    "WS_MSG_ERROR",
    "WS_CONTROL_MESSAGES",
    "WS_END_SENTINEL",
]
