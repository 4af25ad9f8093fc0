"""Health check and environment info endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request

from cms_mock.api.deps import ConfigDep
from cms_mock.core.environment import get_environment_info, to_dict

# Mounted at the root (/health).
router = APIRouter(tags=["health"])
# Mounted under API_NAMESPACE (/api/environment).
api_router = APIRouter(tags=["system"])


@router.get("/health")
async def health_check(request: Request, settings: ConfigDep):
    """Service health check. Degraded until the store has been seeded."""
    env_info = get_environment_info(settings)
    is_ready = request.app.state.database.is_ready
    return {
        "status": "healthy" if is_ready else "degraded",
        "database": "in-memory" if is_ready else "not seeded",
        "version": env_info.version,
        "environment": env_info.environment,
    }


@api_router.get("/environment")
async def environment_info(settings: ConfigDep):
    """Return the active environment and feature flags.

    Lets the frontend show that it is talking to the mock server.
    """
    return to_dict(get_environment_info(settings))
