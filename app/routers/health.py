# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from app.config import settings
from app.dependencies import StoreDep

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    store_mode: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    store: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check(store: StoreDep):
    """
    Health check endpoint.

    Reports whether the API runs against the live or the mock store.
    """
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=settings.ENVIRONMENT,
        store_mode=store.mode,
        version="1.0.0",
    )


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check(store: StoreDep):
    """
    Readiness check endpoint.

    Pings the festival store with a one-row query.
    """
    healthy = store.ping()

    return ReadinessResponse(
        status="ready" if healthy else "degraded",
        store=f"{store.mode}: {'healthy' if healthy else 'unhealthy'}",
        timestamp=_now(),
    )
