"""Processing facility router."""

from fastapi import APIRouter, Depends

from wooltracer.schemas.facility import FacilityOut
from wooltracer.services.analytics import utilization_percentage
from wooltracer.store.base import RecordStore
from wooltracer.store.deps import get_store

router = APIRouter()


@router.get("/", response_model=list[FacilityOut])
async def list_facilities(store: RecordStore = Depends(get_store)):
    """Facilities with utilization in kg plus the derived percentage."""
    return [
        FacilityOut(
            **f.model_dump(),
            utilization_percentage=utilization_percentage(f.capacity, f.current_utilization),
        )
        for f in await store.list_facilities()
    ]
