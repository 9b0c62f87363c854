"""Pydantic schemas for WoolBatch records, journey steps and their workflows."""

from datetime import date, datetime, timezone

from pydantic import ConfigDict, Field, field_validator, model_validator

from wooltracer.schemas.common import BatchStatus, CamelModel, WoolGrade


# ── Journey step (immutable once appended) ───────────────────

class JourneyStep(CamelModel):
    model_config = ConfigDict(frozen=True)

    status: BatchStatus
    location: str
    timestamp: datetime
    handled_by: str
    notes: str | None = None

    @field_validator("timestamp")
    @classmethod
    def _naive_utc(cls, v: datetime) -> datetime:
        # Stored and compared as naive UTC, like utcnow()
        if v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v


# ── Record ───────────────────────────────────────────────────

class WoolBatch(CamelModel):
    """A batch of wool plus its append-only journey history.

    ``current_status`` / ``current_location`` mirror the last history step;
    ``record_step`` is the only way they change.
    """
    id: str
    farm_id: str
    shear_date: date
    weight: float = Field(..., gt=0)  # kg
    grade: WoolGrade
    color: str
    quality_score: float = Field(..., ge=1, le=100)
    current_status: BatchStatus
    current_location: str
    journey_history: list[JourneyStep] = []

    @model_validator(mode="after")
    def _current_matches_latest_step(self):
        if self.journey_history:
            latest = self.journey_history[-1]
            if (self.current_status, self.current_location) != (latest.status, latest.location):
                raise ValueError(
                    "currentStatus/currentLocation must match the latest journey step"
                )
        return self

    @property
    def latest_step(self) -> JourneyStep | None:
        return self.journey_history[-1] if self.journey_history else None

    def record_step(self, step: JourneyStep) -> None:
        self.journey_history.append(step)
        self.current_status = step.status
        self.current_location = step.location


# ── Create ───────────────────────────────────────────────────

class BatchCreate(CamelModel):
    """Payload for POST /api/wool-batches/ (the new batch form).

    Location and handler of the initial journey step default to the farm's
    name and contact person. ``notes`` become the initial step's notes.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    id: str | None = Field(None, min_length=1, max_length=50)
    farm_id: str = Field(..., min_length=1)
    weight: float = Field(..., ge=1)
    grade: WoolGrade
    color: str = Field(..., min_length=1)
    quality_score: float = Field(..., ge=1, le=100)
    shear_date: date | None = None
    initial_status: BatchStatus = BatchStatus.SHEARED
    location: str | None = Field(None, min_length=1)
    handled_by: str | None = Field(None, min_length=1)
    notes: str | None = None


# ── Status update ────────────────────────────────────────────

class StatusUpdate(CamelModel):
    """Payload for PATCH /api/wool-batches/{id}/status."""
    model_config = ConfigDict(str_strip_whitespace=True)

    status: BatchStatus
    location: str = Field(..., min_length=1)
    handled_by: str = Field(..., min_length=1)
    notes: str | None = None


# ── Derived views ────────────────────────────────────────────

class BatchProgress(CamelModel):
    batch_id: str
    current_status: BatchStatus
    progress_percentage: int
    steps_recorded: int


class RecentUpdate(CamelModel):
    """One journey step, tagged with the batch it belongs to."""
    batch_id: str
    farm_id: str
    step: JourneyStep
