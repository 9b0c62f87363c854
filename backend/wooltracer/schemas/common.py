"""Common schema pieces: the camelCase wire base and the closed enums."""

import enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for every wire schema.

    Attributes are snake_case in Python; JSON is camelCase. Input accepts
    either casing, output (FastAPI ``response_model``) is always camelCase.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class BatchStatus(str, enum.Enum):
    """Canonical progression order. Used for display, never enforced."""
    SHEARED = "Sheared"
    SORTED = "Sorted"
    CLEANED = "Cleaned"
    PROCESSED = "Processed"
    SPUN = "Spun"
    DYED = "Dyed"
    WOVEN = "Woven"
    FINISHED = "Finished"
    DELIVERED = "Delivered"


class WoolGrade(str, enum.Enum):
    FINE = "Fine"
    MEDIUM = "Medium"
    COARSE = "Coarse"
    SUPERFINE = "Superfine"


class FacilityType(str, enum.Enum):
    SORTING = "Sorting"
    WASHING = "Washing"
    PROCESSING = "Processing"
    SPINNING = "Spinning"
    DYEING = "Dyeing"
    WEAVING = "Weaving"


# Enum order is definition order
STATUS_ORDER: list[BatchStatus] = list(BatchStatus)
