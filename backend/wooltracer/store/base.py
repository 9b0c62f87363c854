"""RecordStore, the one owner of farms, batches, journey steps and facilities.

Callers read copies and mutate only through these methods, so no caller
can change a collection behind the store's back.  Two implementations:

  - InMemoryRecordStore  → seeded sample collections (store_backend = "memory")
  - SqlRecordStore       → SQLAlchemy async session (store_backend = "sql")
"""

import abc

from wooltracer.schemas.batch import JourneyStep, WoolBatch
from wooltracer.schemas.facility import ProcessingFacility
from wooltracer.schemas.farm import Farm


class RecordStore(abc.ABC):

    # ── Farms ────────────────────────────────────────────────

    @abc.abstractmethod
    async def list_farms(self) -> list[Farm]:
        """All farms in registration order."""

    @abc.abstractmethod
    async def get_farm(self, farm_id: str) -> Farm | None:
        ...

    @abc.abstractmethod
    async def farm_ids(self) -> list[str]:
        """Farm IDs in registration order."""

    @abc.abstractmethod
    async def add_farm(self, farm: Farm) -> Farm:
        """Insert a farm. Raises ConflictError if the ID is taken."""

    # ── Batches ──────────────────────────────────────────────

    @abc.abstractmethod
    async def list_batches(self) -> list[WoolBatch]:
        """All batches in insertion order, each with its full journey history."""

    @abc.abstractmethod
    async def get_batch(self, batch_id: str) -> WoolBatch | None:
        ...

    @abc.abstractmethod
    async def batch_ids(self) -> list[str]:
        """Batch IDs in insertion order."""

    @abc.abstractmethod
    async def add_batch(self, batch: WoolBatch) -> WoolBatch:
        """Insert a batch with its initial history.

        Raises ConflictError if the ID is taken, ReferenceNotFoundError if
        the farm does not exist.
        """

    @abc.abstractmethod
    async def append_step(self, batch_id: str, step: JourneyStep) -> WoolBatch:
        """Append a journey step and move the batch's current status/location.

        Raises ResourceNotFoundError if the batch does not exist.
        """

    # ── Facilities ───────────────────────────────────────────

    @abc.abstractmethod
    async def list_facilities(self) -> list[ProcessingFacility]:
        ...

    @abc.abstractmethod
    async def add_facility(self, facility: ProcessingFacility) -> ProcessingFacility:
        """Insert a facility. Raises ConflictError if the ID is taken."""

    # ── Health ───────────────────────────────────────────────

    async def ping(self) -> None:
        """Raise if the store cannot serve reads."""
        await self.farm_ids()
