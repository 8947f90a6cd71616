"""Admission, rate and size limits configuration."""

import os


# HTTP admission budget per client address (rolling window)
HTTP_RATE_LIMIT_POINTS = int(os.getenv("HTTP_RATE_LIMIT_POINTS", "100"))
HTTP_RATE_LIMIT_WINDOW_SECONDS = float(os.getenv("HTTP_RATE_LIMIT_WINDOW_SECONDS", "60"))
# Idle limiter keys are swept after this many consume() calls
HTTP_RATE_LIMIT_SWEEP_EVERY = int(os.getenv("HTTP_RATE_LIMIT_SWEEP_EVERY", "1024"))

# Channel message budget per connection (rolling window)
WS_MESSAGE_WINDOW_SECONDS = float(os.getenv("WS_MESSAGE_WINDOW_SECONDS", "60"))
WS_MAX_MESSAGES_PER_WINDOW = int(os.getenv("WS_MAX_MESSAGES_PER_WINDOW", "25"))

# Maximum concurrently registered channel sessions
MAX_CONCURRENT_CONNECTIONS = int(os.getenv("MAX_CONCURRENT_CONNECTIONS", "1000"))

# Request body shaping
CONSULTATION_QUERY_MAX_CHARS = int(os.getenv("CONSULTATION_QUERY_MAX_CHARS", "4000"))
CONTEXT_FIELD_MAX_CHARS = int(os.getenv("CONTEXT_FIELD_MAX_CHARS", "200"))
PROBLEM_DESCRIPTION_MAX_CHARS = int(os.getenv("PROBLEM_DESCRIPTION_MAX_CHARS", "4000"))
CHANNEL_MESSAGE_MAX_CHARS = int(os.getenv("CHANNEL_MESSAGE_MAX_CHARS", "65536"))

# Largest accepted HTTP request body; bigger bodies get 413
HTTP_BODY_MAX_BYTES = int(os.getenv("HTTP_BODY_MAX_BYTES", str(10 * 1024 * 1024)))

# Upper bound on asynchronous analysis production; 0 disables the bound
ANALYSIS_TIMEOUT_S = float(os.getenv("ANALYSIS_TIMEOUT_S", "30"))

__all__ = [
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
]
