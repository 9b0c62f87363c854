"""Pydantic schemas for processing facilities."""

from pydantic import Field

from wooltracer.schemas.common import CamelModel, FacilityType


class ProcessingFacility(CamelModel):
    """``current_utilization`` is stored in kg; percentages are derived on read."""
    id: str
    name: str
    type: FacilityType
    location: str
    capacity: float = Field(..., gt=0)  # kg
    current_utilization: float = Field(0.0, ge=0)  # kg


class FacilityOut(ProcessingFacility):
    utilization_percentage: float
