"""Async in-memory database engine and session factory.

One ``MockDatabase`` lives on ``app.state`` for the lifetime of the app.
``setup()`` creates the schema and seeds it from fixtures; a new app
(or a new test) always starts from pristine fixture data.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from cms_mock.mock.seed import seed_database
from cms_mock.models.tables import Base


class MockDatabase:
    """Engine, session factory and seed state for one app instance."""

    def __init__(self, database_url: str, fixtures_dir: Path, echo: bool = False) -> None:
        # StaticPool shares one connection so the in-memory database
        # survives across sessions.
        self.engine = create_async_engine(
            database_url,
            echo=echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        self.fixtures_dir = fixtures_dir
        self._lock = asyncio.Lock()
        self._ready = False

    @property
    def is_ready(self) -> bool:
        return self._ready

    async def setup(self) -> None:
        """Create all tables and seed them. Safe to call more than once."""
        if self._ready:
            return
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        async with self.session_factory() as session:
            await seed_database(session, self.fixtures_dir)
            await session.commit()
        self._ready = True

    async def dispose(self) -> None:
        await self.engine.dispose()
        self._ready = False

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Open a session; one request touches the shared connection at a time.

        Commits on a clean exit, rolls back and re-raises otherwise.
        """
        async with self._lock, self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
