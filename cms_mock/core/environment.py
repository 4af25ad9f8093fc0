"""environment.py — Centralized environment manager.

Reads ENVIRONMENT from settings and provides helpers for startup
validation and environment metadata.

Environment overview:
    development → Simulated network latency, every request logged.
    test        → Instant responses, quiet logs.

Called by: main.py (startup), routes/health.py, middleware.py (headers)
Depends on: config.py (Settings)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlparse

from cms_mock import __version__
from cms_mock.config import Settings, get_settings

logger = logging.getLogger(__name__)

# ─── Valid Environments ───────────────────────────────────────────────────────

ENV_DEVELOPMENT = "development"
ENV_TEST = "test"

VALID_ENVIRONMENTS = frozenset({ENV_DEVELOPMENT, ENV_TEST})


# ─── Environment Info ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class EnvironmentInfo:
    """Immutable snapshot of the current environment configuration.

    Returned by ``get_environment_info()`` and used in health responses
    and the ``/api/environment`` route.
    """

    environment: str           # "development" | "test"
    version: str               # Semantic version of the app
    features: dict[str, bool]  # Feature flags derived from settings


def get_environment_info(settings: Settings | None = None) -> EnvironmentInfo:
    """Build an EnvironmentInfo snapshot from settings.

    Args:
        settings: Settings to describe. Falls back to ``get_settings()``.

    Returns:
        EnvironmentInfo with environment, version, and feature flags.
    """
    settings = settings or get_settings()

    features = {
        "mock_data": True,
        "simulated_latency": settings.effective_delay_ms > 0,
        "request_logging": settings.should_log_requests,
    }

    return EnvironmentInfo(
        environment=settings.environment,
        version=__version__,
        features=features,
    )


# ─── Startup Validation ──────────────────────────────────────────────────────


def _is_valid_http_url(url: str) -> bool:
    parsed = urlparse(url)
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def validate_environment(settings: Settings | None = None) -> None:
    """Validate environment configuration on startup.

    Checks:
        - ENVIRONMENT is one of the valid environments.
        - ALLOWED_ORIGINS entries are full http(s) URLs (or ``*``).
        - RESPONSE_DELAY_MS is not negative.

    Called by: main.py ``lifespan()`` on app startup.

    Raises:
        ValueError: If ENVIRONMENT is not a recognized environment.
        RuntimeError: If origins or the response delay are malformed.
    """
    settings = settings or get_settings()

    if settings.environment not in VALID_ENVIRONMENTS:
        raise ValueError(
            f"Invalid ENVIRONMENT='{settings.environment}'. "
            f"Must be one of: {sorted(VALID_ENVIRONMENTS)}"
        )

    allowed_origins = settings.allowed_origins_list
    if "*" in allowed_origins:
        logger.warning("ALLOWED_ORIGINS contains '*'. Any site can call the mock API.")

    invalid_origins = [
        origin for origin in allowed_origins if origin != "*" and not _is_valid_http_url(origin)
    ]
    if invalid_origins:
        raise RuntimeError(f"ALLOWED_ORIGINS has invalid URL(s): {', '.join(invalid_origins)}")

    if settings.response_delay_ms is not None and settings.response_delay_ms < 0:
        raise RuntimeError("RESPONSE_DELAY_MS must be zero or positive.")

    logger.info(
        "Environment initialized: environment=%s, delay_ms=%d, fixtures=%s",
        settings.environment,
        settings.effective_delay_ms,
        settings.fixtures_dir,
    )


def to_dict(info: EnvironmentInfo) -> dict[str, Any]:
    """Serialize EnvironmentInfo to a JSON-safe dict.

    Used by the health endpoint and the ``/api/environment`` route.
    """
    return {
        "environment": info.environment,
        "version": info.version,
        "features": info.features,
    }
