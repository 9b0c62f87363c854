"""Farm router — registry, registration and per-farm batch views.

Endpoints:
    GET    /api/farms/                   List farms (optional ?search=)
    POST   /api/farms/                   Register a farm
    GET    /api/farms/{farm_id}          Single farm
    GET    /api/farms/{farm_id}/batches  Batches from that farm
    GET    /api/farms/{farm_id}/summary  Batch count / weight / average quality
"""

from fastapi import APIRouter, Depends, Query, status

from wooltracer.middleware.exceptions import ResourceNotFoundError
from wooltracer.schemas.analytics import FarmBatchSummary
from wooltracer.schemas.batch import WoolBatch
from wooltracer.schemas.farm import Farm, FarmCreate
from wooltracer.services.analytics import farm_batch_summary
from wooltracer.services.intake import create_farm
from wooltracer.services.queries import batches_for_farm, filter_farms
from wooltracer.store.base import RecordStore
from wooltracer.store.deps import get_store

router = APIRouter()


async def _require_farm(store: RecordStore, farm_id: str) -> Farm:
    farm = await store.get_farm(farm_id)
    if farm is None:
        raise ResourceNotFoundError("Farm", farm_id)
    return farm


@router.get("/", response_model=list[Farm])
async def list_farms(
    search: str | None = Query(None),
    store: RecordStore = Depends(get_store),
):
    return filter_farms(await store.list_farms(), search)


@router.post("/", response_model=Farm, status_code=status.HTTP_201_CREATED)
async def register_farm(
    body: FarmCreate,
    store: RecordStore = Depends(get_store),
):
    """Register a farm. The ID is generated (farm-NNN) unless supplied."""
    return await create_farm(body, store)


@router.get("/{farm_id}", response_model=Farm)
async def get_farm(
    farm_id: str,
    store: RecordStore = Depends(get_store),
):
    return await _require_farm(store, farm_id)


@router.get("/{farm_id}/batches", response_model=list[WoolBatch])
async def list_farm_batches(
    farm_id: str,
    store: RecordStore = Depends(get_store),
):
    await _require_farm(store, farm_id)
    return batches_for_farm(await store.list_batches(), farm_id)


@router.get("/{farm_id}/summary", response_model=FarmBatchSummary)
async def get_farm_summary(
    farm_id: str,
    store: RecordStore = Depends(get_store),
):
    await _require_farm(store, farm_id)
    return farm_batch_summary(farm_id, await store.list_batches())
