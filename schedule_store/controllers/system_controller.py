# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: System endpoints — health, readiness, metrics.
Pure HTTP layer — no business logic.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from schedule_store.core.config import settings
from schedule_store.core.dependencies import get_schedule_store
from schedule_store.services.schedule_store import ScheduleStore

router = APIRouter(tags=["System"])


@router.get("/health")
async def health_check(store: ScheduleStore = Depends(get_schedule_store)):
    """Liveness check for Docker and orchestration."""
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "days_count": store.day_count(),
        "special_entries_count": store.special_entry_count(),
    }


@router.get("/health/ready")
async def readiness_check(store: ScheduleStore = Depends(get_schedule_store)):
    """Readiness check — the store is in memory, so it is ready once built."""
    return {
        "status": "ready",
        "service": settings.SERVICE_NAME,
        "date_format": store.date_format,
        "time_format": store.time_format,
        "timezone": str(store.timezone),
    }


@router.get("/metrics")
def prometheus_metrics():
    """Expose Prometheus metrics in OpenMetrics format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
