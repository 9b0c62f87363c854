"""Pydantic schemas for Farm records and farm intake."""

from datetime import date

from pydantic import ConfigDict, Field, field_validator

from wooltracer.schemas.common import CamelModel
from wooltracer.schemas.validators import (
    parse_certifications,
    validate_email,
    validate_url,
)

DEFAULT_FARM_PHOTO = "https://images.unsplash.com/photo-1516466823543-f945a3732093"


# ── Record ───────────────────────────────────────────────────

class Farm(CamelModel):
    id: str
    name: str
    location: str
    sheep_count: int = Field(..., ge=0)
    annual_production: float = Field(..., ge=0)  # kg
    certifications: list[str] = []
    contact_person: str
    contact_email: str
    joined_date: date
    photo: str = DEFAULT_FARM_PHOTO


# ── Create ───────────────────────────────────────────────────

class FarmCreate(CamelModel):
    """Payload for POST /api/farms/ (the farm registration form).

    ``id`` and ``joined_date`` are assigned by the intake workflow.
    An explicit ``id`` is accepted but must not collide with an existing farm.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    id: str | None = Field(None, min_length=1, max_length=50)
    name: str = Field(..., min_length=3)
    location: str = Field(..., min_length=3)
    sheep_count: int = Field(..., ge=1)
    annual_production: float = Field(..., ge=1)
    contact_person: str = Field(..., min_length=3)
    contact_email: str
    certifications: list[str] = []
    photo: str = DEFAULT_FARM_PHOTO

    @field_validator("contact_email")
    @classmethod
    def _validate_email(cls, v: str) -> str:
        return validate_email(v)

    @field_validator("photo", mode="before")
    @classmethod
    def _validate_photo(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_FARM_PHOTO
        return validate_url(v)

    @field_validator("certifications", mode="before")
    @classmethod
    def _split_certifications(cls, v):
        return parse_certifications(v)
