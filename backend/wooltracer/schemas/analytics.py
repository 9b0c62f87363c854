"""Pydantic schemas for derived analytics (never persisted)."""

from wooltracer.schemas.common import CamelModel


class FarmProduction(CamelModel):
    farm_id: str
    farm_name: str
    production: float


class MonthlyProduction(CamelModel):
    month: str  # "Jan" … "Dec"
    amount: float


class FacilityUtilization(CamelModel):
    facility_id: str
    facility_name: str
    utilization_percentage: float


class AnalyticsSummary(CamelModel):
    total_wool_produced: float
    # None when there are no batches
    average_quality_score: int | None
    production_by_farm: list[FarmProduction]
    status_distribution: dict[str, int]
    monthly_production: list[MonthlyProduction]
    facility_utilization: list[FacilityUtilization]


class FarmBatchSummary(CamelModel):
    farm_id: str
    total_batches: int
    total_weight: float
    average_quality_score: int | None


class DashboardOverview(CamelModel):
    total_farms: int
    active_batches: int
    processing_partners: int
    average_quality_score: int | None
    grade_distribution: dict[str, int]
