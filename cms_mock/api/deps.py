"""Dependency injection for API routes.

Provides FastAPI dependencies for configuration and database sessions.
Both are read from ``app.state`` so every app built by ``create_app()``
(including the one per test) has its own settings and its own store.

Called by: All route modules via type aliases (DBSession, ConfigDep)
Depends on: config.py, models/database.py
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from cms_mock.config import Settings

# ─── Settings ──────────────────────────────────────────────────────────────────


def get_config(request: Request) -> Settings:
    """Return the settings the running app was built with."""
    return request.app.state.settings


ConfigDep = Annotated[Settings, Depends(get_config)]

# ─── Database ──────────────────────────────────────────────────────────────────


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield an async session on the app's in-memory store."""
    async with request.app.state.database.session() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db)]
