"""FastAPI dependency that hands each request its record store."""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from wooltracer.config import settings
from wooltracer.database import get_db
from wooltracer.store.base import RecordStore
from wooltracer.store.memory import InMemoryRecordStore
from wooltracer.store.sql import SqlRecordStore


def build_memory_store() -> InMemoryRecordStore:
    if settings.seed_on_startup:
        return InMemoryRecordStore.with_sample_data()
    return InMemoryRecordStore()


async def get_store(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> RecordStore:
    """SQL store bound to the request session, or the app-wide in-memory store.

    The session from ``get_db`` is only used (and only connects) for the
    SQL backend; its commit/rollback makes every request all-or-nothing.
    """
    if settings.store_backend == "sql":
        return SqlRecordStore(db)

    store = getattr(request.app.state, "record_store", None)
    if store is None:
        store = request.app.state.record_store = build_memory_store()
    return store
