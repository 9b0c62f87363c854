"""JourneyStep — immutable, append-only event log for a wool batch.

Every status/location transition lands here.  ``position`` is the step's
index within its batch; it and ``recorded_at`` always agree on order.
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wooltracer.database import Base


class JourneyStepRecord(Base):
    __tablename__ = "journey_steps"
    __table_args__ = (
        UniqueConstraint("batch_id", "position", name="uq_journey_steps_batch_position"),
    )

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    batch_id: Mapped[str] = mapped_column(
        String(50), ForeignKey("wool_batches.id"), nullable=False, index=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)

    status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    handled_by: Mapped[str] = mapped_column(String(255), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text)
    recorded_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, index=True
    )

    # ── Relationships ────────────────────────────────────────
    batch = relationship("WoolBatchRecord", back_populates="journey_history")
