"""WoolBatch — a quantity of wool sheared together.

Created by batch intake with an initial "Sheared" step and mutated only by
appending journey steps.  ``current_status`` and ``current_location`` are
denormalized copies of the latest step; ``record_step`` keeps them in sync.

Lifecycle:  Sheared → Sorted → Cleaned → … → Delivered (order not enforced)
"""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wooltracer.database import Base
from wooltracer.utils.clock import utcnow


class WoolBatchRecord(Base):
    __tablename__ = "wool_batches"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    seq: Mapped[int] = mapped_column(Integer, nullable=False, unique=True, index=True)

    # ── Origin traceability ──────────────────────────────────
    farm_id: Mapped[str] = mapped_column(
        String(50), ForeignKey("farms.id"), nullable=False, index=True
    )
    shear_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)

    # ── Wool details ─────────────────────────────────────────
    weight: Mapped[float] = mapped_column(Float, nullable=False)  # kg
    # Fine | Medium | Coarse | Superfine
    grade: Mapped[str] = mapped_column(String(20), nullable=False)
    color: Mapped[str] = mapped_column(String(100), nullable=False)
    quality_score: Mapped[float] = mapped_column(Float, nullable=False)

    # ── Denormalized tail of journey_history ─────────────────
    current_status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    current_location: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, index=True)

    # ── Relationships ────────────────────────────────────────
    farm = relationship("FarmRecord", back_populates="batches")
    journey_history = relationship(
        "JourneyStepRecord", back_populates="batch",
        order_by="JourneyStepRecord.position",
        cascade="all, delete-orphan",
    )

    def record_step(self, step) -> None:
        """Append ``step`` and move the current status/location to it."""
        step.position = len(self.journey_history)
        self.journey_history.append(step)
        self.current_status = step.status
        self.current_location = step.location
