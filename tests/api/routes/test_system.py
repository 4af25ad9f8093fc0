"""Tests for /health and /api/environment."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from httpx import AsyncClient

from cms_mock import __version__
from cms_mock.main import create_app


@pytest.mark.anyio
async def test_health_returns_200(client: AsyncClient):
    response = await client.get("/health")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "healthy"
    assert data["database"] == "in-memory"
    assert data["version"] == __version__
    assert data["environment"] == "test"


@pytest.mark.anyio
async def test_environment_info(client: AsyncClient):
    response = await client.get("/api/environment")
    assert response.status_code == 200

    data = response.json()
    assert data["environment"] == "test"
    assert data["features"]["mock_data"] is True
    assert data["features"]["simulated_latency"] is False
    assert data["features"]["request_logging"] is False


def test_lifespan_seeds_store(test_settings):
    """Starting the app through its lifespan should seed the store."""
    app = create_app(test_settings)
    with TestClient(app) as client:
        assert client.get("/health").json()["status"] == "healthy"
        assert client.get("/api/students").json()["data"]["total"] == 13


def test_health_degraded_before_setup(test_settings):
    """Without lifespan, the store is not seeded and health says so."""
    app = create_app(test_settings)
    client = TestClient(app)
    data = client.get("/health").json()
    assert data["status"] == "degraded"
    assert data["database"] == "not seeded"


def test_sql_echo_follows_debug_log_level(test_settings):
    assert create_app(test_settings).state.database.engine.echo is False

    settings = test_settings.model_copy(update={"log_level": "debug"})
    assert create_app(settings).state.database.engine.echo is True


def test_custom_namespace(test_settings):
    settings = test_settings.model_copy(update={"api_namespace": "/mock-api/"})
    app = create_app(settings)
    with TestClient(app) as client:
        assert client.get("/mock-api/courses").status_code == 200
        assert client.get("/api/courses").status_code == 404
