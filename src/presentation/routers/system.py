"""System router for non-versioned application endpoints.

Provides root and health endpoints that are not part of the versioned
API contract. Both are side-effect free.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import get_database
from src.core.enums import StorageBackend


system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: Application name, status and version.
    """
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> JSONResponse:
    """Health check endpoint for monitoring and load balancers.

    The database backend is probed with a trivial query; an unreachable
    database answers 503.

    Returns:
        JSONResponse: Health status and active storage backend.
    """
    healthy = True
    if settings.storage_backend == StorageBackend.DATABASE:
        healthy = await get_database().check_connection()

    return JSONResponse(
        status_code=status.HTTP_200_OK
        if healthy
        else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "healthy" if healthy else "unhealthy",
            "storage_backend": settings.storage_backend.value,
        },
    )
