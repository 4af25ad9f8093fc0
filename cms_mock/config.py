"""Application settings via pydantic-settings.

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  DEVELOPER QUICK-START  — What env vars do I need?
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#
#  None. Every setting has a default that works for local frontend work.
#
#  ENVIRONMENT controls the runtime tier:
#
#    development → Responses are delayed (400ms) to feel like a real
#                  network, and every request is logged.
#
#    test        → No delay, no per-request logging. Used by the test
#                  suite and by frontend e2e runs.
#
#  RESPONSE_DELAY_MS and LOG_REQUESTS override the per-environment defaults.
#
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FIXTURES_DIR = Path(__file__).parent / "mock" / "fixtures"

# Mirrors the latency a browser-side mock adds in development.
DEVELOPMENT_DELAY_MS = 400


class Settings(BaseSettings):
    """Typed configuration loaded from environment variables.

    Called by: Every module that needs configuration (via ``get_settings()``
    or the ``settings`` stored on ``app.state``).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # "development" = simulated latency + request logging
    # "test"        = instant responses, quiet logs
    environment: str = "development"

    log_level: str = "INFO"
    # Comma-separated CORS origins.
    allowed_origins: str = "http://localhost:3000"
    # Prefix for every CMS route (login, students, courses...).
    api_namespace: str = "api"

    # In-memory store. StaticPool keeps a single connection alive so the
    # seeded data survives for the lifetime of the app.
    database_url: str = "sqlite+aiosqlite://"
    fixtures_dir: Path = DEFAULT_FIXTURES_DIR

    # None → derived from ENVIRONMENT (see properties below).
    response_delay_ms: int | None = None
    log_requests: bool | None = None

    host: str = "127.0.0.1"
    port: int = 8000

    # ─── Computed Properties ──────────────────────────────────────────────────

    @property
    def is_test(self) -> bool:
        """True when running under the test environment."""
        return self.environment == "test"

    @property
    def effective_delay_ms(self) -> int:
        """Artificial latency applied to every response."""
        if self.response_delay_ms is not None:
            return self.response_delay_ms
        return 0 if self.is_test else DEVELOPMENT_DELAY_MS

    @property
    def should_log_requests(self) -> bool:
        """Whether LoggingMiddleware emits a line per request."""
        if self.log_requests is not None:
            return self.log_requests
        return not self.is_test

    @property
    def api_prefix(self) -> str:
        """Return API_NAMESPACE as a router prefix (``/api``)."""
        namespace = self.api_namespace.strip("/")
        return f"/{namespace}" if namespace else ""

    @property
    def allowed_origins_list(self) -> list[str]:
        """Return ALLOWED_ORIGINS as a normalized list."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()
