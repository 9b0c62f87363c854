"""In-memory record store.

Holds the collections as private lists.  Every read hands out deep copies
and every mutation checks its preconditions before touching a list, so a
failed call leaves the store exactly as it was.
"""

from wooltracer.middleware.exceptions import (
    ConflictError,
    ReferenceNotFoundError,
    ResourceNotFoundError,
)
from wooltracer.schemas.batch import JourneyStep, WoolBatch
from wooltracer.schemas.facility import ProcessingFacility
from wooltracer.schemas.farm import Farm
from wooltracer.store.base import RecordStore


class InMemoryRecordStore(RecordStore):

    def __init__(
        self,
        farms: list[Farm] | None = None,
        batches: list[WoolBatch] | None = None,
        facilities: list[ProcessingFacility] | None = None,
    ):
        self._farms: list[Farm] = []
        self._batches: list[WoolBatch] = []
        self._facilities: list[ProcessingFacility] = []

        for farm in farms or []:
            self._insert_farm(farm)
        for batch in batches or []:
            self._insert_batch(batch)
        for facility in facilities or []:
            self._insert_facility(facility)

    @classmethod
    def with_sample_data(cls) -> "InMemoryRecordStore":
        from wooltracer.store.seed import sample_batches, sample_facilities, sample_farms

        return cls(
            farms=sample_farms(),
            batches=sample_batches(),
            facilities=sample_facilities(),
        )

    # ── Internal lookups ─────────────────────────────────────

    def _find_farm(self, farm_id: str) -> Farm | None:
        return next((f for f in self._farms if f.id == farm_id), None)

    def _find_batch(self, batch_id: str) -> WoolBatch | None:
        return next((b for b in self._batches if b.id == batch_id), None)

    def _insert_farm(self, farm: Farm) -> Farm:
        if self._find_farm(farm.id) is not None:
            raise ConflictError(f"Farm ID already exists: {farm.id}")
        stored = farm.model_copy(deep=True)
        self._farms.append(stored)
        return stored

    def _insert_batch(self, batch: WoolBatch) -> WoolBatch:
        if self._find_batch(batch.id) is not None:
            raise ConflictError(f"Batch ID already exists: {batch.id}")
        if self._find_farm(batch.farm_id) is None:
            raise ReferenceNotFoundError("Farm", batch.farm_id)
        stored = batch.model_copy(deep=True)
        self._batches.append(stored)
        return stored

    def _insert_facility(self, facility: ProcessingFacility) -> ProcessingFacility:
        if any(f.id == facility.id for f in self._facilities):
            raise ConflictError(f"Facility ID already exists: {facility.id}")
        stored = facility.model_copy(deep=True)
        self._facilities.append(stored)
        return stored

    # ── Farms ────────────────────────────────────────────────

    async def list_farms(self) -> list[Farm]:
        return [f.model_copy(deep=True) for f in self._farms]

    async def get_farm(self, farm_id: str) -> Farm | None:
        farm = self._find_farm(farm_id)
        return farm.model_copy(deep=True) if farm else None

    async def farm_ids(self) -> list[str]:
        return [f.id for f in self._farms]

    async def add_farm(self, farm: Farm) -> Farm:
        return self._insert_farm(farm).model_copy(deep=True)

    # ── Batches ──────────────────────────────────────────────

    async def list_batches(self) -> list[WoolBatch]:
        return [b.model_copy(deep=True) for b in self._batches]

    async def get_batch(self, batch_id: str) -> WoolBatch | None:
        batch = self._find_batch(batch_id)
        return batch.model_copy(deep=True) if batch else None

    async def batch_ids(self) -> list[str]:
        return [b.id for b in self._batches]

    async def add_batch(self, batch: WoolBatch) -> WoolBatch:
        return self._insert_batch(batch).model_copy(deep=True)

    async def append_step(self, batch_id: str, step: JourneyStep) -> WoolBatch:
        batch = self._find_batch(batch_id)
        if batch is None:
            raise ResourceNotFoundError("Batch", batch_id)
        batch.record_step(step)
        return batch.model_copy(deep=True)

    # ── Facilities ───────────────────────────────────────────

    async def list_facilities(self) -> list[ProcessingFacility]:
        return [f.model_copy(deep=True) for f in self._facilities]

    async def add_facility(self, facility: ProcessingFacility) -> ProcessingFacility:
        return self._insert_facility(facility).model_copy(deep=True)
