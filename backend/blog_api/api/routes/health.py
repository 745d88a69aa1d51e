"""Health & Readiness Probes: liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health and /api/v1/health always return 200 if the process is up (liveness)
    - GET /api/v1/health/ready returns 503 if the database is unreachable (readiness)

Design Decisions:
    - Unversioned /health kept for the container HEALTHCHECK
    - Separate liveness/readiness: liveness restarts, readiness removes from the load balancer
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import blog_api.infrastructure.database as db_module
from blog_api.config import get_settings
from blog_api.core.compose_probes import compose_health
from blog_api.schemas.probes import HealthResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
@router.get("/api/v1/health", response_model=HealthResponse)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    settings = get_settings()
    logger.debug("Health check endpoint called")
    return compose_health(
        settings.service_name, settings.app_version, datetime.now(timezone.utc),
    )


@router.get("/api/v1/health/ready")
async def readiness_check():
    """Readiness probe - includes database connectivity."""
    manager = db_module.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
