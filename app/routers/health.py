# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# - /health: liveness, always "OK", touches nothing else
# - /health/ready: readiness, checks the database answers a trivial query
# =============================================================================

import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.dependencies import OptionalBundleDep

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    database: str
    timestamp: str


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_class=PlainTextResponse)
async def health_check():
    """
    Liveness check endpoint.

    Returns a fixed "OK" regardless of database state.
    Used by Kubernetes/Docker for restart decisions.
    """
    return PlainTextResponse("OK")


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check(bundle: OptionalBundleDep):
    """
    Readiness check endpoint.

    Returns 200 when the database accepts queries, 503 otherwise
    (including before the lifespan has built the services).
    """
    if bundle is None:
        database = "unavailable"
    else:
        database = "healthy"
        try:
            async with bundle.person_service.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.warning(f"Readiness check failed: {e}")
            database = "unhealthy"

    response = ReadinessResponse(
        status="ready" if database == "healthy" else "degraded",
        database=database,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
    if database != "healthy":
        return JSONResponse(status_code=503, content=response.model_dump())
    return response
