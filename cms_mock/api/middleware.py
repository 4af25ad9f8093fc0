"""Middleware for request IDs, logging, latency simulation, and error handling.

Middleware stack (executed in reverse registration order):
    1. RequestIDMiddleware     → Assigns unique X-Request-ID to every request
    2. LoggingMiddleware       → Logs method, path, status, and duration
    3. ResponseDelayMiddleware → Sleeps RESPONSE_DELAY_MS before answering
    4. EnvironmentMiddleware   → Adds X-Mock-Env header (development|test)
    5. ErrorHandlerMiddleware  → Catches unhandled exceptions → JSON envelope

Called by: main.py (``register_middleware()``)
Depends on: config.py (Settings via ``app.state.settings``)
"""

from __future__ import annotations

import asyncio
import time
import uuid

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from cms_mock.api.errors import error_body

logger = structlog.get_logger()


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Inject a unique request ID into every request/response.

    If the client sends an ``X-Request-ID`` header, we reuse it.
    Otherwise, a new UUID is generated.
    """

    async def dispatch(self, request: Request, call_next):  # noqa: ANN001
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with method, path, status, and duration.

    Silent when request logging is off (the default in the test environment).
    """

    async def dispatch(self, request: Request, call_next):  # noqa: ANN001
        start = time.perf_counter()

        response: Response = await call_next(request)

        if request.app.state.settings.should_log_requests:
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            logger.info(
                "request_completed",
                method=request.method,
                path=request.url.path,
                query=request.url.query,
                status=response.status_code,
                duration_ms=duration_ms,
                request_id=getattr(request.state, "request_id", "unknown"),
            )
        return response


class ResponseDelayMiddleware(BaseHTTPMiddleware):
    """Hold every response for the configured delay to mimic network latency."""

    async def dispatch(self, request: Request, call_next):  # noqa: ANN001
        response = await call_next(request)
        delay_ms = request.app.state.settings.effective_delay_ms
        if delay_ms > 0:
            await asyncio.sleep(delay_ms / 1000)
        return response


class EnvironmentMiddleware(BaseHTTPMiddleware):
    """Add ``X-Mock-Env`` response header on every request.

    Tells the frontend (and devtools) that responses come from the mock
    server, and which environment it runs in.
    """

    async def dispatch(self, request: Request, call_next):  # noqa: ANN001
        response = await call_next(request)
        response.headers["X-Mock-Env"] = request.app.state.settings.environment
        return response


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Catch unhandled exceptions and return the 500 error envelope.

    Logs the full traceback via structlog; the client only sees
    ``{"msg": "server error", "code": 500}``.
    """

    async def dispatch(self, request: Request, call_next):  # noqa: ANN001
        try:
            return await call_next(request)
        except Exception as exc:
            request_id = getattr(request.state, "request_id", "unknown")
            logger.exception(
                "unhandled_error",
                error=str(exc),
                request_id=request_id,
                path=request.url.path,
            )
            return JSONResponse(status_code=500, content=error_body("server error", 500))


def register_middleware(app: FastAPI) -> None:
    """Register all middleware in the correct order.

    Starlette middleware is executed in reverse registration order,
    so we register in this order:
        1. ErrorHandler   (registered first → innermost, right around the routes)
        2. Environment    (injects X-Mock-Env header, 500 envelopes included)
        3. ResponseDelay  (simulated latency, 500 envelopes included)
        4. Logging        (logs request details)
        5. RequestID      (registered last → executed first → assigns request ID)

    ``create_app()`` adds CORSMiddleware after this, outside all of them.
    """
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(EnvironmentMiddleware)
    app.add_middleware(ResponseDelayMiddleware)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
