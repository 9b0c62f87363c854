"""Aggregation engine tests."""

from datetime import date

import pytest

from wooltracer.schemas.batch import WoolBatch
from wooltracer.schemas.common import BatchStatus, WoolGrade
from wooltracer.schemas.facility import ProcessingFacility
from wooltracer.services import analytics
from wooltracer.store.seed import sample_batches, sample_facilities, sample_farms


def _batch(batch_id: str, farm_id: str, weight: float, score: float, **overrides) -> WoolBatch:
    fields = dict(
        id=batch_id,
        farm_id=farm_id,
        shear_date=date(2023, 5, 1),
        weight=weight,
        grade=WoolGrade.FINE,
        color="White",
        quality_score=score,
        current_status=BatchStatus.SHEARED,
        current_location="Highland Sheep Ranch",
    )
    fields.update(overrides)
    return WoolBatch(**fields)


def _facility(capacity: float, used: float) -> ProcessingFacility:
    return ProcessingFacility(
        id="facility-x", name="Test Mill", type="Washing",
        location="Leeds, UK", capacity=capacity, current_utilization=used,
    )


@pytest.mark.unit
class TestTotalsAndAverages:

    def test_total_wool_produced(self):
        assert analytics.total_wool_produced(sample_batches()) == 1940

    def test_total_wool_produced_empty(self):
        assert analytics.total_wool_produced([]) == 0

    def test_average_quality_rounds_half_up(self):
        # (92 + 87 + 98 + 85) / 4 = 90.5
        assert analytics.average_quality_score(sample_batches()) == 91

    def test_average_quality_rounds_down_below_half(self):
        batches = [_batch("batch-001", "farm-001", 100, 80), _batch("batch-002", "farm-001", 100, 81),
                   _batch("batch-003", "farm-001", 100, 81)]
        assert analytics.average_quality_score(batches) == 81  # 80.67

    def test_average_quality_empty_is_none(self):
        assert analytics.average_quality_score([]) is None


@pytest.mark.unit
class TestProductionByFarm:

    def test_per_farm_totals_in_farm_order(self):
        result = analytics.production_by_farm(sample_farms(), sample_batches())
        assert [(p.farm_id, p.production) for p in result] == [
            ("farm-001", 840),
            ("farm-002", 380),
            ("farm-003", 720),
        ]
        assert result[0].farm_name == "Highland Sheep Ranch"

    def test_sum_matches_total(self):
        batches = sample_batches()
        result = analytics.production_by_farm(sample_farms(), batches)
        assert sum(p.production for p in result) == analytics.total_wool_produced(batches)

    def test_farm_without_batches_reports_zero(self):
        batches = [_batch("batch-001", "farm-001", 450, 92)]
        result = analytics.production_by_farm(sample_farms(), batches)
        assert {p.farm_id: p.production for p in result} == {
            "farm-001": 450,
            "farm-002": 0,
            "farm-003": 0,
        }


@pytest.mark.unit
class TestDistributions:

    def test_status_distribution_has_all_statuses(self):
        result = analytics.status_distribution(sample_batches())
        assert list(result) == [s.value for s in BatchStatus]
        assert sum(result.values()) == 4
        assert result["Processed"] == 1
        assert result["Spun"] == 1
        assert result["Cleaned"] == 1
        assert result["Dyed"] == 1
        assert result["Delivered"] == 0

    def test_status_distribution_empty(self):
        result = analytics.status_distribution([])
        assert len(result) == 9
        assert set(result.values()) == {0}

    def test_grade_distribution(self):
        assert analytics.grade_distribution(sample_batches()) == {
            "Fine": 1, "Medium": 2, "Coarse": 0, "Superfine": 1,
        }


@pytest.mark.unit
class TestMonthlyProduction:

    def test_buckets_by_shear_month(self):
        result = analytics.monthly_production(sample_batches())
        assert [m.month for m in result] == analytics.MONTH_LABELS
        amounts = {m.month: m.amount for m in result}
        assert amounts["Apr"] == 380
        assert amounts["May"] == 840
        assert amounts["Jun"] == 720
        assert amounts["Jan"] == 0
        assert amounts["Dec"] == 0

    def test_year_independent(self):
        batches = [
            _batch("batch-001", "farm-001", 100, 90, shear_date=date(2021, 3, 2)),
            _batch("batch-002", "farm-001", 50, 90, shear_date=date(2024, 3, 28)),
        ]
        amounts = {m.month: m.amount for m in analytics.monthly_production(batches)}
        assert amounts["Mar"] == 150

    def test_unreadable_shear_date_is_skipped(self):
        good = _batch("batch-001", "farm-001", 100, 90, shear_date=date(2023, 7, 1))
        bad = WoolBatch.model_construct(
            id="batch-002", farm_id="farm-001", shear_date="not-a-date", weight=999,
            grade=WoolGrade.FINE, color="White", quality_score=90,
            current_status=BatchStatus.SHEARED, current_location="Farm", journey_history=[],
        )
        amounts = {m.month: m.amount for m in analytics.monthly_production([good, bad])}
        assert amounts["Jul"] == 100
        assert sum(amounts.values()) == 100

    def test_iso_string_shear_date_is_read(self):
        batch = WoolBatch.model_construct(
            id="batch-001", farm_id="farm-001", shear_date="2023-11-05", weight=200,
            grade=WoolGrade.FINE, color="White", quality_score=90,
            current_status=BatchStatus.SHEARED, current_location="Farm", journey_history=[],
        )
        amounts = {m.month: m.amount for m in analytics.monthly_production([batch])}
        assert amounts["Nov"] == 200


@pytest.mark.unit
class TestFacilityUtilization:

    def test_percentage_of_capacity(self):
        assert analytics.utilization_percentage(2000, 1300) == 65

    def test_full_capacity_is_100(self):
        assert analytics.utilization_percentage(2000, 2000) == 100

    def test_over_capacity_is_clamped(self):
        assert analytics.utilization_percentage(2000, 2600) == 100

    def test_negative_is_clamped_to_zero(self):
        assert analytics.utilization_percentage(2000, -10) == 0

    def test_zero_capacity_reports_zero(self):
        assert analytics.utilization_percentage(0, 100) == 0

    def test_per_facility_entries(self):
        result = analytics.facility_utilization(sample_facilities())
        assert [(u.facility_name, u.utilization_percentage) for u in result] == [
            ("CleanWool Facility", 65),
            ("Yorkshire Processing Co.", 80),
            ("Traditional Spinners Ltd.", 70),
            ("Natural Dyes Workshop", 45),
            ("Heritage Weavers", 60),
        ]

    def test_facility_model_rejects_non_positive_capacity(self):
        with pytest.raises(ValueError):
            _facility(0, 0)


@pytest.mark.unit
class TestCompositeViews:

    def test_build_summary(self):
        summary = analytics.build_summary(sample_farms(), sample_batches(), sample_facilities())
        assert summary.total_wool_produced == 1940
        assert summary.average_quality_score == 91
        assert len(summary.production_by_farm) == 3
        assert len(summary.status_distribution) == 9
        assert len(summary.monthly_production) == 12
        assert len(summary.facility_utilization) == 5

    def test_build_summary_empty(self):
        summary = analytics.build_summary([], [], [])
        assert summary.total_wool_produced == 0
        assert summary.average_quality_score is None
        assert summary.production_by_farm == []
        assert sum(summary.status_distribution.values()) == 0

    def test_summary_serializes_camel_case(self):
        summary = analytics.build_summary(sample_farms(), sample_batches(), sample_facilities())
        data = summary.model_dump(by_alias=True)
        assert "totalWoolProduced" in data
        assert "farmName" in data["productionByFarm"][0]

    def test_farm_batch_summary(self):
        summary = analytics.farm_batch_summary("farm-001", sample_batches())
        assert summary.total_batches == 2
        assert summary.total_weight == 840
        assert summary.average_quality_score == 89  # (92 + 85) / 2 = 88.5

    def test_farm_batch_summary_without_batches(self):
        summary = analytics.farm_batch_summary("farm-999", sample_batches())
        assert summary.total_batches == 0
        assert summary.total_weight == 0
        assert summary.average_quality_score is None

    def test_dashboard_overview(self):
        overview = analytics.dashboard_overview(sample_farms(), sample_batches(), sample_facilities())
        assert overview.total_farms == 3
        assert overview.active_batches == 4
        assert overview.processing_partners == 5
        assert overview.average_quality_score == 91
        assert overview.grade_distribution["Medium"] == 2
