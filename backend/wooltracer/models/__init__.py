"""Aggregate model imports so every table is registered on Base."""

from wooltracer.models.farm import FarmRecord
from wooltracer.models.wool_batch import WoolBatchRecord
from wooltracer.models.journey_step import JourneyStepRecord
from wooltracer.models.facility import ProcessingFacilityRecord

__all__ = [
    "FarmRecord", "WoolBatchRecord", "JourneyStepRecord", "ProcessingFacilityRecord",
]
