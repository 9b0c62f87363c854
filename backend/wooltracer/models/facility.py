"""ProcessingFacility — sorting, washing, spinning … partners downstream of farms.

``current_utilization`` is stored in kg; the percentage shown on dashboards
is derived from it and ``capacity`` at read time.
"""

from sqlalchemy import Float, String
from sqlalchemy.orm import Mapped, mapped_column

from wooltracer.database import Base


class ProcessingFacilityRecord(Base):
    __tablename__ = "processing_facilities"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # Sorting | Washing | Processing | Spinning | Dyeing | Weaving
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    capacity: Mapped[float] = mapped_column(Float, nullable=False)  # kg
    current_utilization: Mapped[float] = mapped_column(Float, default=0.0)  # kg
