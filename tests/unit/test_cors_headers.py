"""CORS headers on mock responses, including error envelopes."""

from __future__ import annotations

import pytest

ORIGIN = {"Origin": "http://localhost:3000"}


@pytest.mark.anyio
async def test_cors_header_on_success(client) -> None:
    response = await client.get("/api/courses", headers=ORIGIN)
    assert response.status_code == 200
    assert response.headers.get("access-control-allow-origin") == "http://localhost:3000"


@pytest.mark.anyio
async def test_cors_header_on_error_envelope(client) -> None:
    """403 login failures must still carry CORS headers for the browser."""
    response = await client.get(
        "/api/login",
        params={"email": "student@admin.com", "password": "nope", "loginType": "student"},
        headers=ORIGIN,
    )
    assert response.status_code == 403
    assert response.headers.get("access-control-allow-origin") == "http://localhost:3000"


@pytest.mark.anyio
async def test_cors_header_on_server_error(app, client) -> None:
    """500 envelopes from ErrorHandlerMiddleware must still include CORS headers."""

    async def boom():
        raise RuntimeError("kaboom")

    app.add_api_route("/api/boom", boom)

    response = await client.get("/api/boom", headers=ORIGIN)
    assert response.status_code == 500
    assert response.json() == {"msg": "server error", "code": 500}
    assert response.headers.get("access-control-allow-origin") == "http://localhost:3000"


@pytest.mark.anyio
async def test_unknown_origin_not_allowed(client) -> None:
    response = await client.get("/api/courses", headers={"Origin": "http://evil.example"})
    assert "access-control-allow-origin" not in response.headers
