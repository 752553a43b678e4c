"""Health & Readiness Probes: liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/health/ always returns 200 if process is up (liveness)
    - GET /api/health/ready returns 503 if database is unreachable (readiness)
    - Both sit behind the API key gate like every non-documentation path
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from user_api.api.dependencies import get_container
from user_api.container import ServiceContainer

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "user-api"}


@router.get("/ready")
async def readiness_check(
    container: ServiceContainer = Depends(get_container),
):
    """Readiness probe: includes database connectivity."""
    if not await container.db.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
