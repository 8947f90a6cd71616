"""R³ ASI consultation relay server.

A FastAPI application with two surfaces:

HTTP (stateless, rate limited per client address):
    POST /api/v1/consultation          validated request -> generated consultation
    POST /api/v1/algorithm-generation  validated request -> generated blueprint
    GET  /api/v1/asi-status            current platform metrics
    GET  /healthz, GET /               health check and landing page

Real-time channel (WS /ws, JSON frames keyed by ``type``):
    asiWelcome on connect; requestSuperintelligentAnalysis answered
    asynchronously with superintelligentInsights or asiError. Delivery is
    best effort: results for a session that has since disconnected are
    dropped.

Package layout:
    config/     declarative settings read from the environment
    errors/     domain exceptions
    handlers/   registry, limiters, request handlers, dispatcher, channel loop
    messages/   boundary validators and payload builders
    producers/  pluggable result producers
    state/      dataclasses shared across handlers
    telemetry/  OpenTelemetry instruments and spans
    logging/    logging setup and context fields

Environment Variables:
    PORT, HOST, ALLOWED_ORIGINS
    HTTP_RATE_LIMIT_POINTS, HTTP_RATE_LIMIT_WINDOW_SECONDS
    WS_MAX_MESSAGES_PER_WINDOW, WS_MESSAGE_WINDOW_SECONDS, WS_IDLE_TIMEOUT_S
    MAX_CONCURRENT_CONNECTIONS, ANALYSIS_TIMEOUT_S, PLATFORM_DRIFT_INTERVAL_S
    APP_LOG_LEVEL, OTEL_CONSOLE_EXPORT
"""

__version__ = "1.0.0"
