"""Analytics router: summaries recomputed from the record store on every read.

Endpoints:
    GET  /api/analytics-summary/        Totals, distributions, utilization
    GET  /api/dashboard-summary/        Headline counts + grade mix
    GET  /api/journey-updates/recent    Latest journey steps across batches
"""

from fastapi import APIRouter, Depends, Query

from wooltracer.config import settings
from wooltracer.schemas.analytics import AnalyticsSummary, DashboardOverview
from wooltracer.schemas.batch import RecentUpdate
from wooltracer.services.analytics import build_summary, dashboard_overview
from wooltracer.services.timeline import recent_updates
from wooltracer.store.base import RecordStore
from wooltracer.store.deps import get_store

router = APIRouter()


@router.get("/analytics-summary/", response_model=AnalyticsSummary)
async def get_analytics_summary(store: RecordStore = Depends(get_store)):
    return build_summary(
        await store.list_farms(),
        await store.list_batches(),
        await store.list_facilities(),
    )


@router.get("/dashboard-summary/", response_model=DashboardOverview)
async def get_dashboard_summary(store: RecordStore = Depends(get_store)):
    return dashboard_overview(
        await store.list_farms(),
        await store.list_batches(),
        await store.list_facilities(),
    )


@router.get("/journey-updates/recent", response_model=list[RecentUpdate])
async def get_recent_updates(
    limit: int | None = Query(None, ge=1, le=100),
    store: RecordStore = Depends(get_store),
):
    return recent_updates(
        await store.list_batches(),
        limit=limit or settings.recent_updates_limit,
    )
