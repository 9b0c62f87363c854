"""Farm — the origin of every wool batch.

Registered once through the intake workflow and never mutated afterwards.
``seq`` keeps registration order, which drives sequential ID generation
(``farm-003`` → ``farm-004``).
"""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Float, Integer, JSON, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wooltracer.database import Base
from wooltracer.utils.clock import utcnow


class FarmRecord(Base):
    __tablename__ = "farms"

    # Human-readable code, e.g. "farm-001"
    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    seq: Mapped[int] = mapped_column(Integer, nullable=False, unique=True, index=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    sheep_count: Mapped[int] = mapped_column(Integer, default=0)
    annual_production: Mapped[float] = mapped_column(Float, default=0.0)  # kg
    # JSON array, insertion order kept: ["Organic", "ZQ Certified"]
    certifications: Mapped[list] = mapped_column(JSON, default=list)

    contact_person: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_email: Mapped[str] = mapped_column(String(255), nullable=False)
    joined_date: Mapped[date] = mapped_column(Date, nullable=False)
    photo: Mapped[str] = mapped_column(String(500), nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    # ── Relationships ────────────────────────────────────────
    batches = relationship("WoolBatchRecord", back_populates="farm")
