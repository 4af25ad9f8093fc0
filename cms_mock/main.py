"""FastAPI application factory.

Builds the FastAPI app with middleware, routes, and lifespan events.
Each app owns its settings and its in-memory store (``app.state``), so
two apps never share data:

    create_app()                                  → settings from env / .env
    create_app(Settings(environment="test"))      → instant, quiet, fresh data

Called by: Uvicorn (``uvicorn cms_mock.main:app``), ``python -m cms_mock``
Depends on: config.py, environment.py, models/database.py, routes/*, middleware.py
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cms_mock import __version__
from cms_mock.api.errors import register_exception_handlers
from cms_mock.api.middleware import register_middleware
from cms_mock.api.routes import auth, courses, health, students
from cms_mock.config import Settings, get_settings
from cms_mock.core.environment import validate_environment
from cms_mock.models.database import MockDatabase

logger = structlog.get_logger()


def configure_logging(settings: Settings) -> None:
    """Configure structlog for the given settings."""
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer() if settings.is_test
            else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup and shutdown events.

    Validates the configuration, then creates and seeds the store.
    """
    settings: Settings = app.state.settings
    validate_environment(settings)
    await app.state.database.setup()
    logger.info(
        "app_startup",
        environment=settings.environment,
        delay_ms=settings.effective_delay_ms,
        api_prefix=settings.api_prefix,
    )
    yield
    await app.state.database.dispose()
    logger.info("app_shutdown")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build and configure the FastAPI application.

    Args:
        settings: Explicit settings; defaults to ``get_settings()``.

    Returns:
        Configured FastAPI application instance. The store is seeded by
        the lifespan handler (or by awaiting ``app.state.database.setup()``).
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="CMS Mock Server",
        description="Fixture-backed mock of the course management API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = MockDatabase(
        settings.database_url,
        settings.fixtures_dir,
        echo=settings.log_level.upper() == "DEBUG",
    )

    # Custom middleware (logging, latency, etc.)
    register_middleware(app)
    register_exception_handlers(app)

    # CORS is added last so it wraps every other middleware, including the
    # 500 envelope built by ErrorHandlerMiddleware.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    prefix = settings.api_prefix
    app.include_router(health.router)
    app.include_router(health.api_router, prefix=prefix)
    app.include_router(auth.router, prefix=prefix)
    app.include_router(students.router, prefix=prefix)
    app.include_router(courses.router, prefix=prefix)

    return app


app = create_app()
