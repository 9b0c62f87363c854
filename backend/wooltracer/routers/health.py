"""Health check endpoints for load balancers and monitoring."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from wooltracer.config import settings
from wooltracer.store.base import RecordStore
from wooltracer.store.deps import get_store

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Lightweight liveness check (no store access)."""
    return {
        "status": "ok",
        "service": "WoolTracer",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment,
    }


@router.get("/health/ready")
async def readiness_check(store: RecordStore = Depends(get_store)):
    """Readiness check: 200 only if the record store answers."""
    checks = {
        "service": "ok",
        "store": "unknown",
    }
    overall_healthy = True

    try:
        await store.ping()
        checks["store"] = "ok"
    except Exception as e:
        checks["store"] = f"error: {str(e)[:100]}"
        overall_healthy = False

    return JSONResponse(
        status_code=status.HTTP_200_OK if overall_healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "healthy" if overall_healthy else "unhealthy",
            "service": "WoolTracer",
            "backend": settings.store_backend,
            "checks": checks,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )
