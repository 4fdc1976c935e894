"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 until the collaborators are initialized (readiness)
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from museum_api.infrastructure import services as services_module

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "museum-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe — collaborators wired to an initialized Firebase app."""
    if services_module.services is None:
        logger.warning("Readiness check failed: services not initialized")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "services_uninitialized",
            },
        )
    return {"status": "ready", "checks": {"firebase": "initialized"}}
