"""Search and lookup over batch and farm lists.

Filters return a subsequence of their input in the original order; an empty
term returns the input unchanged.
"""

from typing import Sequence

from wooltracer.schemas.batch import WoolBatch
from wooltracer.schemas.farm import Farm


def _matches(term: str, *values: str) -> bool:
    return any(term in value.lower() for value in values)


def filter_batches(batches: Sequence[WoolBatch], term: str | None) -> list[WoolBatch]:
    """Batches whose id, current status or current location contains ``term`` (case-insensitive)."""
    if not term:
        return list(batches)
    needle = term.lower()
    return [
        b for b in batches
        if _matches(needle, b.id, b.current_status.value, b.current_location)
    ]


def filter_farms(farms: Sequence[Farm], term: str | None) -> list[Farm]:
    """Farms whose name or location contains ``term`` (case-insensitive)."""
    if not term:
        return list(farms)
    needle = term.lower()
    return [f for f in farms if _matches(needle, f.name, f.location)]


def batches_for_farm(batches: Sequence[WoolBatch], farm_id: str) -> list[WoolBatch]:
    return [b for b in batches if b.farm_id == farm_id]
