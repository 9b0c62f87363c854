"""Farm and batch intake workflow.

Handles the creation of new records, including:
  - Assigning a sequential ID (farm-NNN / batch-NNN) unless one is supplied
  - Filling defaults (joined date, shear date, initial journey step)
  - Checking that a batch's farm exists before anything is written

Schema rules (weights, score range, email format, …) are enforced by the
``FarmCreate`` / ``BatchCreate`` models before these functions run.  New
records are inserted into the store; analytics are not recomputed here.
"""

import logging
from datetime import date, datetime

from wooltracer.middleware.exceptions import ConflictError, ReferenceNotFoundError
from wooltracer.schemas.batch import BatchCreate, JourneyStep, WoolBatch
from wooltracer.schemas.farm import Farm, FarmCreate
from wooltracer.store.base import RecordStore
from wooltracer.utils.clock import utcnow
from wooltracer.utils.numbering import BATCH_PREFIX, FARM_PREFIX, next_sequential_id

logger = logging.getLogger("wooltracer.intake")

DEFAULT_INTAKE_LOCATION = "Farm Warehouse"


def _assign_id(explicit_id: str | None, existing_ids: list[str], prefix: str) -> str:
    if explicit_id:
        if explicit_id in existing_ids:
            raise ConflictError(f"{prefix.capitalize()} ID already exists: {explicit_id}")
        return explicit_id
    return next_sequential_id(prefix, existing_ids)


async def create_farm(
    body: FarmCreate,
    store: RecordStore,
    today: date | None = None,
) -> Farm:
    """Register a new farm and return it.

    Raises:
        ConflictError: explicit ID taken, or no sequential ID can be derived.
    """
    farm_id = _assign_id(body.id, await store.farm_ids(), FARM_PREFIX)

    farm = Farm(
        id=farm_id,
        name=body.name,
        location=body.location,
        sheep_count=body.sheep_count,
        annual_production=body.annual_production,
        certifications=body.certifications,
        contact_person=body.contact_person,
        contact_email=body.contact_email,
        joined_date=today or utcnow().date(),
        photo=body.photo,
    )
    created = await store.add_farm(farm)

    logger.info("Registered farm %s (%s)", created.id, created.name)
    return created


async def create_batch(
    body: BatchCreate,
    store: RecordStore,
    now: datetime | None = None,
) -> WoolBatch:
    """Create a new wool batch with its initial journey step.

    The initial step's location defaults to the farm's name and its handler
    to the farm's contact person.

    Raises:
        ReferenceNotFoundError: the farm does not exist.
        ConflictError: explicit ID taken, or no sequential ID can be derived.
    """
    farm = await store.get_farm(body.farm_id)
    if farm is None:
        raise ReferenceNotFoundError("Farm", body.farm_id)

    batch_id = _assign_id(body.id, await store.batch_ids(), BATCH_PREFIX)
    now = now or utcnow()

    initial_step = JourneyStep(
        status=body.initial_status,
        location=body.location or farm.name or DEFAULT_INTAKE_LOCATION,
        timestamp=now,
        handled_by=body.handled_by or farm.contact_person,
        notes=body.notes or None,
    )

    batch = WoolBatch(
        id=batch_id,
        farm_id=farm.id,
        shear_date=body.shear_date or now.date(),
        weight=body.weight,
        grade=body.grade,
        color=body.color,
        quality_score=body.quality_score,
        current_status=initial_step.status,
        current_location=initial_step.location,
        journey_history=[initial_step],
    )
    created = await store.add_batch(batch)

    logger.info(
        "Created batch %s for farm %s: %.1f kg %s",
        created.id, farm.id, created.weight, created.grade.value,
    )
    return created
