"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 until the user registry exists (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
    - Readiness reads the module singleton directly: Depends(get_registry) would turn
      "not ready" into an error envelope instead of a probe result
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from user_api.config import get_settings
import user_api.infrastructure.registry as registry_module

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": "user-management-api",
        "version": settings.api_version,
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe — includes registry availability."""
    registry = registry_module.user_registry
    if registry is None:
        logger.warning("Readiness check failed: registry not initialized")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "registry_unavailable",
            },
        )
    return {
        "status": "ready",
        "checks": {"registry": "healthy"},
        "users": registry.count(),
    }
