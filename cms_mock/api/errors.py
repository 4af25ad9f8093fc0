"""Error envelope and exception handlers.

Every failure the frontend sees has the shape ``{"msg": str, "code": int}``.
``code`` is the application code and does not always equal the HTTP
status (a failed login answers HTTP 403 with ``code`` 400).

Called by: main.py (``register_exception_handlers()``), api/routes/*
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class MockApiError(Exception):
    """Raised by route handlers to return an error envelope."""

    def __init__(self, status_code: int, msg: str, code: int | None = None) -> None:
        super().__init__(msg)
        self.status_code = status_code
        self.msg = msg
        self.code = code if code is not None else status_code


def error_body(msg: str, code: int) -> dict[str, object]:
    return {"msg": msg, "code": code}


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query"))
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


async def mock_api_error_handler(request: Request, exc: MockApiError) -> JSONResponse:
    logger.info("%s %s → %d %s", request.method, request.url.path, exc.status_code, exc.msg)
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.msg, exc.code))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _describe_validation_error(exc)
    logger.info("%s %s → 400 %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content=error_body(message, 400))


def register_exception_handlers(app: FastAPI) -> None:
    """Render route errors and validation errors as envelopes."""
    app.add_exception_handler(MockApiError, mock_api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
