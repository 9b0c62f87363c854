"""Aggregation engine. Derives dashboard analytics from raw records.

Every function is a pure function of the collections passed in; nothing is
cached, so callers recompute on each read.

Conventions:
    - Averages over an empty collection are ``None`` ("no data"), never NaN.
    - Quality averages round half-up to an integer (92.5 → 93).
    - Facility utilization is kg in, percentage out, clamped to [0, 100].
"""

import logging
import math
from datetime import date, datetime
from typing import Iterable

from wooltracer.schemas.analytics import (
    AnalyticsSummary,
    DashboardOverview,
    FacilityUtilization,
    FarmBatchSummary,
    FarmProduction,
    MonthlyProduction,
)
from wooltracer.schemas.batch import WoolBatch
from wooltracer.schemas.common import STATUS_ORDER, WoolGrade
from wooltracer.schemas.facility import ProcessingFacility
from wooltracer.schemas.farm import Farm

logger = logging.getLogger(__name__)

MONTH_LABELS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _shear_month(value) -> int | None:
    """Calendar month (1–12) of a shear date, or None when it can't be read."""
    if isinstance(value, (date, datetime)):
        return value.month
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip()).month
        except ValueError:
            return None
    return None


# ── Single aggregates ────────────────────────────────────────

def total_wool_produced(batches: Iterable[WoolBatch]) -> float:
    return sum(b.weight for b in batches)


def average_quality_score(batches: Iterable[WoolBatch]) -> int | None:
    scores = [b.quality_score for b in batches]
    if not scores:
        return None
    return _round_half_up(sum(scores) / len(scores))


def production_by_farm(
    farms: Iterable[Farm], batches: Iterable[WoolBatch]
) -> list[FarmProduction]:
    """One entry per farm in farm order; farms without batches report 0."""
    totals: dict[str, float] = {}
    for batch in batches:
        totals[batch.farm_id] = totals.get(batch.farm_id, 0) + batch.weight

    return [
        FarmProduction(farm_id=farm.id, farm_name=farm.name, production=totals.get(farm.id, 0))
        for farm in farms
    ]


def status_distribution(batches: Iterable[WoolBatch]) -> dict[str, int]:
    """Batch count per status; all nine statuses present, canonical order."""
    counts = {status.value: 0 for status in STATUS_ORDER}
    for batch in batches:
        counts[batch.current_status.value] += 1
    return counts


def grade_distribution(batches: Iterable[WoolBatch]) -> dict[str, int]:
    counts = {grade.value: 0 for grade in WoolGrade}
    for batch in batches:
        counts[batch.grade.value] += 1
    return counts


def monthly_production(batches: Iterable[WoolBatch]) -> list[MonthlyProduction]:
    """Twelve Jan–Dec buckets of shear weight, year-independent.

    Batches whose shear date can't be read are skipped.
    """
    amounts = [0.0] * 12
    for batch in batches:
        month = _shear_month(batch.shear_date)
        if month is None:
            logger.warning(
                "Skipping batch %s in monthly production: unreadable shear date %r",
                batch.id, batch.shear_date,
            )
            continue
        amounts[month - 1] += batch.weight

    return [
        MonthlyProduction(month=label, amount=amount)
        for label, amount in zip(MONTH_LABELS, amounts)
    ]


def utilization_percentage(capacity: float, current_utilization: float) -> float:
    """``current_utilization`` (kg) as a percentage of ``capacity``, clamped to [0, 100]."""
    if not capacity or capacity <= 0:
        return 0.0
    pct = current_utilization / capacity * 100
    return round(min(max(pct, 0.0), 100.0), 2)


def facility_utilization(
    facilities: Iterable[ProcessingFacility],
) -> list[FacilityUtilization]:
    return [
        FacilityUtilization(
            facility_id=f.id,
            facility_name=f.name,
            utilization_percentage=utilization_percentage(f.capacity, f.current_utilization),
        )
        for f in facilities
    ]


# ── Composite views ──────────────────────────────────────────

def build_summary(
    farms: list[Farm],
    batches: list[WoolBatch],
    facilities: list[ProcessingFacility],
) -> AnalyticsSummary:
    return AnalyticsSummary(
        total_wool_produced=total_wool_produced(batches),
        average_quality_score=average_quality_score(batches),
        production_by_farm=production_by_farm(farms, batches),
        status_distribution=status_distribution(batches),
        monthly_production=monthly_production(batches),
        facility_utilization=facility_utilization(facilities),
    )


def farm_batch_summary(farm_id: str, batches: Iterable[WoolBatch]) -> FarmBatchSummary:
    farm_batches = [b for b in batches if b.farm_id == farm_id]
    return FarmBatchSummary(
        farm_id=farm_id,
        total_batches=len(farm_batches),
        total_weight=total_wool_produced(farm_batches),
        average_quality_score=average_quality_score(farm_batches),
    )


def dashboard_overview(
    farms: list[Farm],
    batches: list[WoolBatch],
    facilities: list[ProcessingFacility],
) -> DashboardOverview:
    return DashboardOverview(
        total_farms=len(farms),
        active_batches=len(batches),
        processing_partners=len(facilities),
        average_quality_score=average_quality_score(batches),
        grade_distribution=grade_distribution(batches),
    )
