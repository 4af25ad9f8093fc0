"""Tests for the middleware stack (api/middleware.py)."""

from __future__ import annotations

import time

import pytest
from httpx import ASGITransport, AsyncClient
from structlog.testing import capture_logs

from cms_mock.config import Settings
from cms_mock.main import create_app


async def _get(settings: Settings, path: str, **kwargs):
    app = create_app(settings)
    await app.state.database.setup()
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            return await ac.get(path, **kwargs)
    finally:
        await app.state.database.dispose()


@pytest.mark.anyio
async def test_request_id_is_generated(client):
    response = await client.get("/health")
    assert response.headers["X-Request-ID"]


@pytest.mark.anyio
async def test_request_id_is_echoed(client):
    response = await client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


@pytest.mark.anyio
async def test_environment_header(client):
    response = await client.get("/api/courses")
    assert response.headers["X-Mock-Env"] == "test"


@pytest.mark.anyio
async def test_response_delay():
    settings = Settings(_env_file=None, environment="test", response_delay_ms=50)
    start = time.perf_counter()
    response = await _get(settings, "/health")
    assert response.status_code == 200
    assert time.perf_counter() - start >= 0.05


@pytest.mark.anyio
async def test_response_delay_applies_to_server_errors():
    settings = Settings(_env_file=None, environment="test", response_delay_ms=50)
    app = create_app(settings)

    async def boom():
        raise RuntimeError("kaboom")

    app.add_api_route("/boom", boom)
    await app.state.database.setup()
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            start = time.perf_counter()
            response = await ac.get("/boom")
            elapsed = time.perf_counter() - start
    finally:
        await app.state.database.dispose()

    assert response.status_code == 500
    assert elapsed >= 0.05


@pytest.mark.anyio
async def test_unhandled_error_returns_envelope(app, client):
    async def boom():
        raise RuntimeError("kaboom")

    app.add_api_route("/boom", boom)

    response = await client.get("/boom")
    assert response.status_code == 500
    assert response.json() == {"msg": "server error", "code": 500}


@pytest.mark.anyio
async def test_request_logging_enabled():
    settings = Settings(_env_file=None, environment="test", log_requests=True)
    with capture_logs() as logs:
        await _get(settings, "/api/courses", params={"page": 1, "limit": 2})

    completed = [entry for entry in logs if entry["event"] == "request_completed"]
    assert len(completed) == 1
    assert completed[0]["method"] == "GET"
    assert completed[0]["path"] == "/api/courses"
    assert completed[0]["query"] == "page=1&limit=2"
    assert completed[0]["status"] == 200


@pytest.mark.anyio
async def test_request_logging_silent_in_test(client):
    with capture_logs() as logs:
        await client.get("/api/courses")
    assert not [entry for entry in logs if entry["event"] == "request_completed"]
