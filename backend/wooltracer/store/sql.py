"""SQL record store over a request-scoped AsyncSession.

Commit / rollback belongs to the session owner (``get_db``); this class only
adds and flushes, so a failing request leaves no partial rows behind.
"""

from sqlalchemy import func, select, text
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from wooltracer.middleware.exceptions import (
    ConflictError,
    ReferenceNotFoundError,
    ResourceNotFoundError,
)
from wooltracer.models.facility import ProcessingFacilityRecord
from wooltracer.models.farm import FarmRecord
from wooltracer.models.journey_step import JourneyStepRecord
from wooltracer.models.wool_batch import WoolBatchRecord
from wooltracer.schemas.batch import JourneyStep, WoolBatch
from wooltracer.schemas.facility import ProcessingFacility
from wooltracer.schemas.farm import Farm
from wooltracer.store.base import RecordStore


# ── Row → schema conversion ──────────────────────────────────

def _farm_out(row: FarmRecord) -> Farm:
    return Farm(
        id=row.id,
        name=row.name,
        location=row.location,
        sheep_count=row.sheep_count,
        annual_production=row.annual_production,
        certifications=list(row.certifications or []),
        contact_person=row.contact_person,
        contact_email=row.contact_email,
        joined_date=row.joined_date,
        photo=row.photo,
    )


def _step_out(row: JourneyStepRecord) -> JourneyStep:
    return JourneyStep(
        status=row.status,
        location=row.location,
        timestamp=row.recorded_at,
        handled_by=row.handled_by,
        notes=row.notes,
    )


def _step_row(step: JourneyStep) -> JourneyStepRecord:
    return JourneyStepRecord(
        status=step.status.value,
        location=step.location,
        handled_by=step.handled_by,
        notes=step.notes,
        recorded_at=step.timestamp,
    )


def _batch_out(row: WoolBatchRecord) -> WoolBatch:
    return WoolBatch(
        id=row.id,
        farm_id=row.farm_id,
        shear_date=row.shear_date,
        weight=row.weight,
        grade=row.grade,
        color=row.color,
        quality_score=row.quality_score,
        current_status=row.current_status,
        current_location=row.current_location,
        journey_history=[_step_out(s) for s in row.journey_history],
    )


def _facility_out(row: ProcessingFacilityRecord) -> ProcessingFacility:
    return ProcessingFacility(
        id=row.id,
        name=row.name,
        type=row.type,
        location=row.location,
        capacity=row.capacity,
        current_utilization=row.current_utilization,
    )


class SqlRecordStore(RecordStore):

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _next_seq(self, model) -> int:
        current = await self.db.scalar(select(func.coalesce(func.max(model.seq), 0)))
        return (current or 0) + 1

    async def _load_batch(self, batch_id: str) -> WoolBatchRecord | None:
        result = await self.db.execute(
            select(WoolBatchRecord)
            .where(WoolBatchRecord.id == batch_id)
            .options(selectinload(WoolBatchRecord.journey_history))
        )
        return result.scalar_one_or_none()

    # ── Farms ────────────────────────────────────────────────

    async def list_farms(self) -> list[Farm]:
        result = await self.db.execute(select(FarmRecord).order_by(FarmRecord.seq))
        return [_farm_out(row) for row in result.scalars().all()]

    async def get_farm(self, farm_id: str) -> Farm | None:
        row = await self.db.get(FarmRecord, farm_id)
        return _farm_out(row) if row else None

    async def farm_ids(self) -> list[str]:
        result = await self.db.execute(select(FarmRecord.id).order_by(FarmRecord.seq))
        return list(result.scalars().all())

    async def add_farm(self, farm: Farm) -> Farm:
        if await self.db.get(FarmRecord, farm.id) is not None:
            raise ConflictError(f"Farm ID already exists: {farm.id}")

        row = FarmRecord(
            id=farm.id,
            seq=await self._next_seq(FarmRecord),
            name=farm.name,
            location=farm.location,
            sheep_count=farm.sheep_count,
            annual_production=farm.annual_production,
            certifications=list(farm.certifications),
            contact_person=farm.contact_person,
            contact_email=farm.contact_email,
            joined_date=farm.joined_date,
            photo=farm.photo,
        )
        self.db.add(row)
        await self.db.flush()
        return _farm_out(row)

    # ── Batches ──────────────────────────────────────────────

    async def list_batches(self) -> list[WoolBatch]:
        result = await self.db.execute(
            select(WoolBatchRecord)
            .options(selectinload(WoolBatchRecord.journey_history))
            .order_by(WoolBatchRecord.seq)
        )
        return [_batch_out(row) for row in result.scalars().all()]

    async def get_batch(self, batch_id: str) -> WoolBatch | None:
        row = await self._load_batch(batch_id)
        return _batch_out(row) if row else None

    async def batch_ids(self) -> list[str]:
        result = await self.db.execute(
            select(WoolBatchRecord.id).order_by(WoolBatchRecord.seq)
        )
        return list(result.scalars().all())

    async def add_batch(self, batch: WoolBatch) -> WoolBatch:
        if await self.db.get(WoolBatchRecord, batch.id) is not None:
            raise ConflictError(f"Batch ID already exists: {batch.id}")
        if await self.db.get(FarmRecord, batch.farm_id) is None:
            raise ReferenceNotFoundError("Farm", batch.farm_id)

        row = WoolBatchRecord(
            id=batch.id,
            seq=await self._next_seq(WoolBatchRecord),
            farm_id=batch.farm_id,
            shear_date=batch.shear_date,
            weight=batch.weight,
            grade=batch.grade.value,
            color=batch.color,
            quality_score=batch.quality_score,
            current_status=batch.current_status.value,
            current_location=batch.current_location,
            journey_history=[],
        )
        for step in batch.journey_history:
            row.record_step(_step_row(step))
        self.db.add(row)
        await self.db.flush()
        return _batch_out(row)

    async def append_step(self, batch_id: str, step: JourneyStep) -> WoolBatch:
        row = await self._load_batch(batch_id)
        if row is None:
            raise ResourceNotFoundError("Batch", batch_id)

        row.record_step(_step_row(step))
        await self.db.flush()
        return _batch_out(row)

    # ── Facilities ───────────────────────────────────────────

    async def list_facilities(self) -> list[ProcessingFacility]:
        result = await self.db.execute(
            select(ProcessingFacilityRecord).order_by(ProcessingFacilityRecord.id)
        )
        return [_facility_out(row) for row in result.scalars().all()]

    async def add_facility(self, facility: ProcessingFacility) -> ProcessingFacility:
        if await self.db.get(ProcessingFacilityRecord, facility.id) is not None:
            raise ConflictError(f"Facility ID already exists: {facility.id}")

        row = ProcessingFacilityRecord(
            id=facility.id,
            name=facility.name,
            type=facility.type.value,
            location=facility.location,
            capacity=facility.capacity,
            current_utilization=facility.current_utilization,
        )
        self.db.add(row)
        await self.db.flush()
        return _facility_out(row)

    # ── Health ───────────────────────────────────────────────

    async def ping(self) -> None:
        await self.db.execute(text("SELECT 1"))
