"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 if the OpenAPI template cannot be parsed (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
    - Readiness parses a throwaway copy: the check never touches a request's working document
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from policy_openapi.core.errors import TemplateCorruptionError
from policy_openapi.infrastructure.template_store import TemplateStore, get_template_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "policy-openapi",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(store: TemplateStore = Depends(get_template_store)):
    """Readiness probe — includes template parseability."""
    try:
        store.load()
    except TemplateCorruptionError as exc:
        logger.warning(
            f"Readiness check failed: {exc.message}", extra=exc.to_log_extra(),
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "template_unavailable",
            },
        )
    return {"status": "ready", "checks": {"template": "healthy"}}
