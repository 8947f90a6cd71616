"""Main FastAPI server for the consultation relay.

This module builds the application, which provides:

- The landing page (/ and /static)
- A health check (/healthz)
- JSON endpoints for consultations, platform status and algorithm generation
- The real-time analysis channel (/ws)
- An optional platform drift daemon
- Graceful shutdown of pending analysis tasks

Server Lifecycle:
    1. On startup: telemetry is initialized and the drift daemon started
       when PLATFORM_DRIFT_INTERVAL_S > 0
    2. HTTP requests are admitted per client address, validated and answered
    3. Channel connections are registered, welcomed and served until close
    4. On shutdown: drift daemon stopped, pending analyses cancelled,
       telemetry flushed

Example:
    Run directly with uvicorn:
        $ uvicorn consult_relay.server:app --host 0.0.0.0 --port 3000

    Or through the package entry point:
        $ python -m consult_relay
"""

from __future__ import annotations

import asyncio
import logging
import contextlib
from pathlib import Path
from typing import Any
from collections.abc import AsyncIterator

import orjson
from fastapi import FastAPI, Request, WebSocket
from fastapi.staticfiles import StaticFiles
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, ORJSONResponse

from .config import ALLOWED_METHODS, ALLOWED_ORIGINS, PLATFORM_DRIFT_INTERVAL_S
from .config.server import SECURITY_HEADERS
from .config.limits import HTTP_BODY_MAX_BYTES
from .errors import (
    RateLimitError,
    ValidationError,
    PayloadTooLargeError,
    InternalProcessingError,
    classify_error,
)
from .logging import configure_logging, log_context
from .telemetry import get_metrics, request_span, init_telemetry, shutdown_telemetry
from .handlers.services import Services, build_services
from .handlers.websocket import handle_websocket_connection
from .messages.payloads import status_body, failure_body, algorithm_body, consultation_body
from .config.branding import RATE_LIMIT_FALLBACK, VALIDATION_FALLBACK

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


def _client_key(request: Request) -> str:
    client = request.client
    return client.host if client and client.host else "unknown"


def _services(request: Request) -> Services:
    return request.app.state.services


async def _read_body(request: Request, limit: int) -> bytes:
    """Collect the body, refusing anything over ``limit`` bytes."""
    declared = request.headers.get("content-length")
    if declared is not None and declared.isdigit() and int(declared) > limit:
        raise PayloadTooLargeError(limit)
    chunks: list[bytes] = []
    size = 0
    async for chunk in request.stream():
        size += len(chunk)
        if size > limit:
            raise PayloadTooLargeError(limit)
        chunks.append(chunk)
    return b"".join(chunks)


async def _read_json(request: Request) -> Any:
    """Decode the body; undecodable bodies become None and fail validation later."""
    raw = await _read_body(request, HTTP_BODY_MAX_BYTES)
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        logger.debug("request body is not valid JSON")
        return None


# ============================================================================
# Exception handlers
# ============================================================================


async def _validation_error_handler(request: Request, exc: ValidationError) -> ORJSONResponse:
    get_metrics().errors_total.add(1, {"category": classify_error(exc)})
    return ORJSONResponse(
        failure_body(exc.message, error_code=exc.error_code, fallback=VALIDATION_FALLBACK),
        status_code=400,
    )


async def _payload_too_large_handler(request: Request, exc: PayloadTooLargeError) -> ORJSONResponse:
    logger.info("rejected request body over %s bytes", exc.limit_bytes)
    get_metrics().errors_total.add(1, {"category": classify_error(exc)})
    return ORJSONResponse(
        failure_body(exc.message, error_code=exc.error_code, fallback=VALIDATION_FALLBACK),
        status_code=413,
    )


async def _rate_limit_error_handler(request: Request, exc: RateLimitError) -> ORJSONResponse:
    retry_after = exc.retry_after_seconds
    return ORJSONResponse(
        failure_body(
            str(exc),
            error_code="rate_limited",
            fallback=RATE_LIMIT_FALLBACK,
            retry_after=retry_after,
        ),
        status_code=429,
        headers={"Retry-After": str(retry_after)},
    )


async def _internal_error_handler(request: Request, exc: InternalProcessingError) -> ORJSONResponse:
    return ORJSONResponse(
        failure_body(exc.public_message, fallback=exc.fallback),
        status_code=500,
    )


# ============================================================================
# Platform drift daemon
# ============================================================================


async def platform_drift_daemon(services: Services, interval: float) -> None:
    """Advance the platform metrics every ``interval`` seconds until cancelled."""
    if interval <= 0:
        logger.info("platform drift daemon disabled")
        return
    logger.info("platform drift daemon started interval=%ss", interval)
    while True:
        await asyncio.sleep(interval)
        services.platform.advance()


def _lifespan_for(services: Services, drift_interval: float):
    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        init_telemetry()
        drift_task: asyncio.Task | None = None
        if drift_interval > 0:
            drift_task = asyncio.create_task(platform_drift_daemon(services, drift_interval))
        try:
            yield
        finally:
            if drift_task is not None:
                drift_task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await drift_task
            await services.dispatcher.shutdown()
            shutdown_telemetry()

    return lifespan


# ============================================================================
# Application factory
# ============================================================================


def create_app(
    services: Services | None = None,
    *,
    drift_interval: float = PLATFORM_DRIFT_INTERVAL_S,
) -> FastAPI:
    """Build the FastAPI application around ``services`` (default wiring if None)."""
    configure_logging()
    services = services or build_services()

    app = FastAPI(
        title="R³ ASI Enterprise Platform",
        default_response_class=ORJSONResponse,
        lifespan=_lifespan_for(services, drift_interval),
    )
    app.state.services = services

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_methods=ALLOWED_METHODS,
        allow_headers=["*"],
    )
    app.add_exception_handler(ValidationError, _validation_error_handler)
    app.add_exception_handler(PayloadTooLargeError, _payload_too_large_handler)
    app.add_exception_handler(RateLimitError, _rate_limit_error_handler)
    app.add_exception_handler(InternalProcessingError, _internal_error_handler)

    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
    _register_routes(app)
    return app


def _register_routes(app: FastAPI) -> None:
    @app.get("/", include_in_schema=False)
    async def landing_page():
        """Serve the marketing landing page."""
        return FileResponse(STATIC_DIR / "index.html", media_type="text/html")

    @app.get("/healthz")
    async def healthz(request: Request):
        """Health check endpoint."""
        return {"status": "ok", "sessions": _services(request).registry.count()}

    @app.post("/api/v1/consultation")
    async def consultation(request: Request):
        client_key = _client_key(request)
        with log_context(client_id=client_key), request_span(route="consultation", client_id=client_key):
            body = await _read_json(request)
            result = await _services(request).consultation.handle(body, client_key)
            return consultation_body(result)

    @app.get("/api/v1/asi-status")
    async def asi_status(request: Request):
        return status_body(_services(request).platform.snapshot())

    @app.post("/api/v1/algorithm-generation")
    async def algorithm_generation(request: Request):
        client_key = _client_key(request)
        with log_context(client_id=client_key), request_span(
            route="algorithm_generation",
            client_id=client_key,
        ):
            body = await _read_json(request)
            blueprint = await _services(request).algorithm.handle(body, client_key)
            return algorithm_body(blueprint)

    @app.websocket("/ws")
    async def websocket_endpoint(websocket: WebSocket):
        """Real-time analysis channel."""
        await handle_websocket_connection(websocket, websocket.app.state.services)


app = create_app()

__all__ = ["app", "create_app", "platform_drift_daemon"]
