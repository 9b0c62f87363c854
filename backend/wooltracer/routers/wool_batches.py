"""Wool batch router — intake, tracking and status updates.

Endpoints:
    GET    /api/wool-batches/                    List batches (optional ?search=)
    POST   /api/wool-batches/                    Create a batch with its initial step
    GET    /api/wool-batches/{batch_id}          Single batch with journey history
    PATCH  /api/wool-batches/{batch_id}/status   Append a journey step
    GET    /api/wool-batches/{batch_id}/progress Progress through the supply chain
"""

from fastapi import APIRouter, Depends, Query, status

from wooltracer.middleware.exceptions import ResourceNotFoundError
from wooltracer.schemas.batch import BatchCreate, BatchProgress, StatusUpdate, WoolBatch
from wooltracer.services.intake import create_batch
from wooltracer.services.queries import filter_batches
from wooltracer.services.timeline import append_step, batch_progress
from wooltracer.store.base import RecordStore
from wooltracer.store.deps import get_store

router = APIRouter()


@router.get("/", response_model=list[WoolBatch])
async def list_batches(
    search: str | None = Query(None),
    store: RecordStore = Depends(get_store),
):
    return filter_batches(await store.list_batches(), search)


@router.post("/", response_model=WoolBatch, status_code=status.HTTP_201_CREATED)
async def create_wool_batch(
    body: BatchCreate,
    store: RecordStore = Depends(get_store),
):
    """Create a batch; its history starts with a "Sheared" step at the farm."""
    return await create_batch(body, store)


@router.get("/{batch_id}", response_model=WoolBatch)
async def get_batch(
    batch_id: str,
    store: RecordStore = Depends(get_store),
):
    batch = await store.get_batch(batch_id)
    if batch is None:
        raise ResourceNotFoundError("Batch", batch_id)
    return batch


@router.patch("/{batch_id}/status", response_model=WoolBatch)
async def update_batch_status(
    batch_id: str,
    body: StatusUpdate,
    store: RecordStore = Depends(get_store),
):
    """Append a journey step; the batch's current status/location follow it."""
    return await append_step(store, batch_id, body)


@router.get("/{batch_id}/progress", response_model=BatchProgress)
async def get_batch_progress(
    batch_id: str,
    store: RecordStore = Depends(get_store),
):
    batch = await store.get_batch(batch_id)
    if batch is None:
        raise ResourceNotFoundError("Batch", batch_id)
    return batch_progress(batch)
