"""Aggregator of configuration modules.

This module re-exports the config API from smaller modules:
- server: bind address, port and CORS origins
- limits: rate, size and concurrency limits
- websocket: channel timeouts, close codes and message types
- platform: process-wide metric defaults and drift rules
- producer: synthetic result producer constants
- branding: customer-facing strings
- logging / telemetry: observability settings

Functions live in consult_relay/utils/, never here.
"""

from .server import (
    PORT,
    HOST,
    ALLOWED_ORIGINS,
    ALLOWED_METHODS,
    SERVER_RELOAD,
    SECURITY_HEADERS,
)
from .limits import (
    HTTP_RATE_LIMIT_POINTS,
    HTTP_RATE_LIMIT_WINDOW_SECONDS,
    HTTP_RATE_LIMIT_SWEEP_EVERY,
    WS_MESSAGE_WINDOW_SECONDS,
    WS_MAX_MESSAGES_PER_WINDOW,
    MAX_CONCURRENT_CONNECTIONS,
    CONSULTATION_QUERY_MAX_CHARS,
    CONTEXT_FIELD_MAX_CHARS,
    PROBLEM_DESCRIPTION_MAX_CHARS,
    CHANNEL_MESSAGE_MAX_CHARS,
    HTTP_BODY_MAX_BYTES,
    ANALYSIS_TIMEOUT_S,
)
from .platform import PLATFORM_DRIFT_INTERVAL_S

__all__ = [
    "PORT",
    "HOST",
    "ALLOWED_ORIGINS",
    "ALLOWED_METHODS",
    "SERVER_RELOAD",
    "SECURITY_HEADERS",
    "HTTP_RATE_LIMIT_POINTS",
    "HTTP_RATE_LIMIT_WINDOW_SECONDS",
    "HTTP_RATE_LIMIT_SWEEP_EVERY",
    "WS_MESSAGE_WINDOW_SECONDS",
    "WS_MAX_MESSAGES_PER_WINDOW",
    "MAX_CONCURRENT_CONNECTIONS",
    "CONSULTATION_QUERY_MAX_CHARS",
    "CONTEXT_FIELD_MAX_CHARS",
    "PROBLEM_DESCRIPTION_MAX_CHARS",
    "CHANNEL_MESSAGE_MAX_CHARS",
    "HTTP_BODY_MAX_BYTES",
    "ANALYSIS_TIMEOUT_S",
    "PLATFORM_DRIFT_INTERVAL_S",
]
