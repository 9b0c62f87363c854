"""Journey timeline manager.

Appends status updates to a batch's history.  The history is append-only,
and each new step's timestamp is the append time, never earlier than the
step before it, so insertion order and time order always agree.

Statuses may follow one another in any order; the canonical order only
feeds the progress percentage shown for a batch.
"""

import logging
from datetime import datetime
from typing import Iterable

from wooltracer.middleware.exceptions import ResourceNotFoundError
from wooltracer.schemas.batch import (
    BatchProgress,
    JourneyStep,
    RecentUpdate,
    StatusUpdate,
    WoolBatch,
)
from wooltracer.schemas.common import STATUS_ORDER, BatchStatus
from wooltracer.store.base import RecordStore
from wooltracer.utils.clock import utcnow

logger = logging.getLogger("wooltracer.timeline")


def next_timestamp(batch: WoolBatch, now: datetime | None = None) -> datetime:
    """Append time for a new step, clamped to the latest existing step."""
    now = now or utcnow()
    latest = batch.latest_step
    if latest is not None and latest.timestamp > now:
        return latest.timestamp
    return now


async def append_step(
    store: RecordStore,
    batch_id: str,
    update: StatusUpdate,
    now: datetime | None = None,
) -> WoolBatch:
    """Record a status update for ``batch_id`` and return the updated batch.

    Raises:
        ResourceNotFoundError: if the batch does not exist.
    """
    batch = await store.get_batch(batch_id)
    if batch is None:
        raise ResourceNotFoundError("Batch", batch_id)

    step = JourneyStep(
        status=update.status,
        location=update.location,
        timestamp=next_timestamp(batch, now),
        handled_by=update.handled_by,
        notes=update.notes or None,
    )
    updated = await store.append_step(batch_id, step)

    logger.info(
        "Batch %s moved %s → %s at %s",
        batch_id, batch.current_status.value, step.status.value, step.location,
    )
    return updated


def progress_percentage(status: BatchStatus) -> int:
    """Position of ``status`` in the canonical order, as a rounded percentage."""
    index = STATUS_ORDER.index(BatchStatus(status))
    return round((index + 1) / len(STATUS_ORDER) * 100)


def batch_progress(batch: WoolBatch) -> BatchProgress:
    return BatchProgress(
        batch_id=batch.id,
        current_status=batch.current_status,
        progress_percentage=progress_percentage(batch.current_status),
        steps_recorded=len(batch.journey_history),
    )


def recent_updates(batches: Iterable[WoolBatch], limit: int = 10) -> list[RecentUpdate]:
    """Journey steps across every batch, newest first, at most ``limit``."""
    updates = [
        RecentUpdate(batch_id=batch.id, farm_id=batch.farm_id, step=step)
        for batch in batches
        for step in batch.journey_history
    ]
    # Stable sort: equal timestamps keep batch/insertion order
    updates.sort(key=lambda u: u.step.timestamp, reverse=True)
    return updates[:limit] if limit >= 0 else updates
