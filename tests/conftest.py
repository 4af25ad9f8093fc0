"""Global pytest fixtures."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from cms_mock.config import Settings
from cms_mock.main import create_app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def test_settings() -> Settings:
    """Settings for the test environment: no delay, no request logs."""
    return Settings(_env_file=None, environment="test")


@pytest.fixture
async def app(test_settings: Settings):
    """A fresh app with a freshly seeded store.

    WHY: ASGITransport does not run lifespan events, so the store is
    seeded here the same way ``lifespan()`` does it.
    """
    test_app = create_app(test_settings)
    await test_app.state.database.setup()
    yield test_app
    await test_app.state.database.dispose()


@pytest.fixture
async def client(app):
    """Async test client bound to the per-test app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
