"""Sample dataset: three farms, four batches, five processing facilities.

Facility utilization is stored in kg (e.g. CleanWool runs 1300 kg of its
2000 kg capacity, shown as 65%).
"""

import logging
from datetime import date, datetime

from wooltracer.schemas.batch import JourneyStep, WoolBatch
from wooltracer.schemas.facility import ProcessingFacility
from wooltracer.schemas.farm import Farm
from wooltracer.store.base import RecordStore

logger = logging.getLogger(__name__)


def sample_farms() -> list[Farm]:
    return [
        Farm(
            id="farm-001",
            name="Highland Sheep Ranch",
            location="Scottish Highlands",
            sheep_count=1250,
            certifications=["Organic", "Sustainable Farming"],
            contact_person="John MacLeod",
            contact_email="john@highlandsheep.com",
            joined_date=date(2020, 4, 15),
            annual_production=5600,
            photo="https://images.unsplash.com/photo-1516466823543-f945a3732093",
        ),
        Farm(
            id="farm-002",
            name="Green Valley Wool",
            location="Wales",
            sheep_count=780,
            certifications=["Rainforest Alliance", "Animal Welfare Approved"],
            contact_person="Emma Davies",
            contact_email="emma@greenvalleywool.com",
            joined_date=date(2019, 9, 23),
            annual_production=3200,
            photo="https://images.unsplash.com/photo-1500595046743-cd271d694d30",
        ),
        Farm(
            id="farm-003",
            name="Alpine Merino Farm",
            location="Southern Alps, New Zealand",
            sheep_count=2100,
            certifications=["Organic", "Sustainable Farming", "ZQ Certified"],
            contact_person="David Miller",
            contact_email="david@alpinemerino.co.nz",
            joined_date=date(2018, 6, 10),
            annual_production=9400,
            photo="https://images.unsplash.com/photo-1446824505046-e43605ffb17f",
        ),
    ]


def _step(status, location, timestamp, handled_by, notes=None) -> JourneyStep:
    return JourneyStep(
        status=status,
        location=location,
        timestamp=datetime.fromisoformat(timestamp),
        handled_by=handled_by,
        notes=notes,
    )


def _batch(steps: list[JourneyStep], **fields) -> WoolBatch:
    return WoolBatch(
        current_status=steps[-1].status,
        current_location=steps[-1].location,
        journey_history=steps,
        **fields,
    )


def sample_batches() -> list[WoolBatch]:
    return [
        _batch(
            id="batch-001",
            farm_id="farm-001",
            shear_date=date(2023, 5, 15),
            weight=450,
            grade="Fine",
            color="White",
            quality_score=92,
            steps=[
                _step("Sheared", "Highland Sheep Ranch", "2023-05-15T09:30:00",
                      "John MacLeod", "Spring shearing completed with good yield"),
                _step("Sorted", "Highland Sheep Ranch", "2023-05-17T14:20:00",
                      "Sarah Johnson", "Separated by grade and color"),
                _step("Cleaned", "CleanWool Facility", "2023-05-25T10:15:00",
                      "Mike Thomson", "Washed and dried using eco-friendly processes"),
                _step("Processed", "Yorkshire Processing Co.", "2023-06-02T13:40:00",
                      "Yorkshire Team"),
            ],
        ),
        _batch(
            id="batch-002",
            farm_id="farm-002",
            shear_date=date(2023, 4, 30),
            weight=380,
            grade="Medium",
            color="Cream",
            quality_score=87,
            steps=[
                _step("Sheared", "Green Valley Wool", "2023-04-30T08:45:00", "Robert Davies"),
                _step("Sorted", "Green Valley Wool", "2023-05-01T16:30:00", "Emma Davies"),
                _step("Cleaned", "CleanWool Facility", "2023-05-07T11:20:00", "Mike Thomson"),
                _step("Processed", "Yorkshire Processing Co.", "2023-05-18T14:10:00",
                      "Yorkshire Team"),
                _step("Spun", "Traditional Spinners Ltd.", "2023-05-30T09:50:00",
                      "Traditional Spinners Team", "Spun into medium-weight yarn"),
            ],
        ),
        _batch(
            id="batch-003",
            farm_id="farm-003",
            shear_date=date(2023, 6, 5),
            weight=720,
            grade="Superfine",
            color="White",
            quality_score=98,
            steps=[
                _step("Sheared", "Alpine Merino Farm", "2023-06-05T07:30:00",
                      "Alpine Shearing Team", "Premium merino wool from winter coats"),
                _step("Sorted", "Alpine Merino Farm", "2023-06-06T15:45:00",
                      "Quality Control Team", "Grade A classification - premium quality"),
                _step("Cleaned", "EcoClean Wool Services", "2023-06-12T10:30:00",
                      "EcoClean Team", "Gentle washing to preserve fiber quality"),
            ],
        ),
        _batch(
            id="batch-004",
            farm_id="farm-001",
            shear_date=date(2023, 5, 16),
            weight=390,
            grade="Medium",
            color="Light Gray",
            quality_score=85,
            steps=[
                _step("Sheared", "Highland Sheep Ranch", "2023-05-16T11:20:00", "John MacLeod"),
                _step("Sorted", "Highland Sheep Ranch", "2023-05-17T14:30:00", "Sarah Johnson"),
                _step("Cleaned", "CleanWool Facility", "2023-05-26T09:45:00", "Mike Thomson"),
                _step("Processed", "Yorkshire Processing Co.", "2023-06-03T15:20:00",
                      "Yorkshire Team"),
                _step("Spun", "Traditional Spinners Ltd.", "2023-06-15T13:10:00",
                      "Traditional Spinners Team"),
                _step("Dyed", "Natural Dyes Workshop", "2023-06-28T10:40:00",
                      "Artisan Dye Team", "Dyed with plant-based indigo"),
            ],
        ),
    ]


def sample_facilities() -> list[ProcessingFacility]:
    return [
        ProcessingFacility(id="facility-001", name="CleanWool Facility", type="Washing",
                           location="Leeds, UK", capacity=2000, current_utilization=1300),
        ProcessingFacility(id="facility-002", name="Yorkshire Processing Co.", type="Processing",
                           location="Yorkshire, UK", capacity=1800, current_utilization=1440),
        ProcessingFacility(id="facility-003", name="Traditional Spinners Ltd.", type="Spinning",
                           location="Manchester, UK", capacity=1500, current_utilization=1050),
        ProcessingFacility(id="facility-004", name="Natural Dyes Workshop", type="Dyeing",
                           location="Bristol, UK", capacity=800, current_utilization=360),
        ProcessingFacility(id="facility-005", name="Heritage Weavers", type="Weaving",
                           location="Edinburgh, UK", capacity=1200, current_utilization=720),
    ]


async def seed_store(store: RecordStore) -> bool:
    """Load the sample dataset into an empty store.

    Returns False (and changes nothing) when the store already holds farms.
    """
    if await store.farm_ids():
        logger.info("Record store already populated, skipping seed")
        return False

    for farm in sample_farms():
        await store.add_farm(farm)
    for batch in sample_batches():
        await store.add_batch(batch)
    for facility in sample_facilities():
        await store.add_facility(facility)

    logger.info("Seeded record store with sample farms, batches and facilities")
    return True
