"""Management CLI tests (memory backend)."""

import json

import pytest

from wooltracer import cli
from wooltracer.config import settings
from wooltracer.store.memory import InMemoryRecordStore


@pytest.mark.unit
class TestSummaryCommand:

    def test_prints_sample_summary(self, monkeypatch, capsys):
        monkeypatch.setattr(settings, "store_backend", "memory")
        monkeypatch.setattr(settings, "seed_on_startup", True)

        cli.summary()

        data = json.loads(capsys.readouterr().out)
        assert data["totalWoolProduced"] == 1940
        assert data["averageQualityScore"] == 91
        assert len(data["monthlyProduction"]) == 12
        assert data["facilityUtilization"][0]["utilizationPercentage"] == 65

    def test_unseeded_store_prints_empty_summary(self, monkeypatch, capsys):
        monkeypatch.setattr(settings, "store_backend", "memory")
        monkeypatch.setattr(settings, "seed_on_startup", False)

        cli.summary()

        data = json.loads(capsys.readouterr().out)
        assert data["totalWoolProduced"] == 0
        assert data["averageQualityScore"] is None
        assert data["productionByFarm"] == []


@pytest.mark.asyncio
@pytest.mark.unit
class TestSummaryForStore:

    async def test_camel_case_json(self):
        output = await cli._summary_for(InMemoryRecordStore.with_sample_data())
        data = json.loads(output)
        assert {p["farmName"] for p in data["productionByFarm"]} == {
            "Highland Sheep Ranch", "Green Valley Wool", "Alpine Merino Farm",
        }
        assert sum(data["statusDistribution"].values()) == 4
