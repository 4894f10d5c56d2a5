"""System router for non-versioned application endpoints.

Root, health and configuration endpoints live outside the versioned API
contract and never require authentication.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import get_database

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Service name and version."""
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> JSONResponse:
    """Liveness plus a database round trip.

    Returns:
        200 with ``{"status": "healthy"}`` when the database answers,
        503 with ``{"status": "unhealthy"}`` otherwise.
    """
    if await get_database().check_connection():
        return JSONResponse(content={"status": "healthy", "database": "ok"})
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "unhealthy", "database": "unreachable"},
    )


@system_router.get("/config")
async def get_config() -> JSONResponse:
    """Effective settings with secrets left out. Development only."""
    if not settings.is_development:
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={"detail": "Config endpoint only available in development"},
        )

    return JSONResponse(
        content={
            "environment": settings.environment.value,
            "debug": settings.debug,
            "api": {
                "name": settings.app_name,
                "version": settings.app_version,
                "base_url": settings.api_base_url,
                "v1_prefix": settings.api_v1_prefix,
            },
            "database": {
                "url": "<redacted>",
                "echo": settings.db_echo,
            },
            "cors": {
                "origins": settings.cors_origin_list,
            },
            "logging": {
                "level": settings.log_level,
                "format": settings.log_format,
            },
            "worker": {
                "price_refresh_seconds": settings.price_refresh_interval_seconds,
                "account_sync_seconds": settings.account_sync_interval_seconds,
            },
        }
    )
