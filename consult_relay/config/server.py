"""HTTP server binding and cross-origin configuration.

Environment Variables:
    PORT: Listening port (default 3000).
    HOST: Bind address (default 0.0.0.0).
    ALLOWED_ORIGINS: Comma-separated origins allowed by CORS. Empty or unset
        means permissive ("*").
"""

from __future__ import annotations

import os

from ..utils.env import env_csv, env_flag

PORT = int(os.getenv("PORT", "3000"))
HOST = os.getenv("HOST", "0.0.0.0")

ALLOWED_ORIGINS: list[str] = env_csv("ALLOWED_ORIGINS") or ["*"]
ALLOWED_METHODS: list[str] = ["GET", "POST"]

# Sent on every HTTP response
SECURITY_HEADERS: dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Content-Security-Policy": (
        "default-src 'self'; "
        "script-src 'self' 'unsafe-inline'; "
        "style-src 'self' 'unsafe-inline'; "
        "connect-src 'self' ws: wss:; "
        "img-src 'self' data:; "
        "object-src 'none'; "
        "base-uri 'self'; "
        "frame-ancestors 'self'"
    ),
}

# Uvicorn reload is only meant for local development
SERVER_RELOAD = env_flag("SERVER_RELOAD", False)

__all__ = [
    "PORT",
    "HOST",
    "ALLOWED_ORIGINS",
    "ALLOWED_METHODS",
    "SERVER_RELOAD",
    "SECURITY_HEADERS",
]
