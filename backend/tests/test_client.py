"""Typed client tests against the in-process app and mocked transports."""

import logging

import httpx
import pytest
from pydantic import ValidationError

from wooltracer.client import ApiError, NetworkError, WoolTracerClient
from wooltracer.schemas.batch import StatusUpdate
from wooltracer.schemas.common import BatchStatus

pytestmark = [pytest.mark.asyncio, pytest.mark.api]


class TestClientReads:

    async def test_get_all_farms(self, api):
        farms = await api.farms.get_all_farms()
        assert [f.id for f in farms] == ["farm-001", "farm-002", "farm-003"]
        assert farms[0].contact_email == "john@highlandsheep.com"

    async def test_search_farms(self, api):
        farms = await api.farms.get_all_farms(search="wales")
        assert [f.id for f in farms] == ["farm-002"]

    async def test_farm_summary(self, api):
        summary = await api.farms.get_farm_summary("farm-003")
        assert summary.total_batches == 1
        assert summary.average_quality_score == 98

    async def test_batches_by_farm_id(self, api):
        batches = await api.batches.get_batches_by_farm_id("farm-001")
        assert [b.id for b in batches] == ["batch-001", "batch-004"]

    async def test_batch_progress(self, api):
        progress = await api.batches.get_batch_progress("batch-004")
        assert progress.current_status == BatchStatus.DYED
        assert progress.progress_percentage == 67

    async def test_facilities(self, api):
        facilities = await api.facilities.get_all_facilities()
        assert facilities[1].utilization_percentage == 80

    async def test_analytics(self, api):
        summary = await api.analytics.get_analytics_data()
        assert summary.total_wool_produced == 1940
        overview = await api.analytics.get_dashboard_overview()
        assert overview.total_farms == 3

    async def test_recent_updates(self, api):
        updates = await api.analytics.get_recent_updates(limit=2)
        assert len(updates) == 2
        assert updates[0].step.status == BatchStatus.DYED


class TestClientWrites:

    async def test_create_farm(self, api):
        farm = await api.farms.create_farm({
            "name": "Moorland Flock",
            "location": "Yorkshire Dales",
            "sheepCount": 320,
            "annualProduction": 1400,
            "contactPerson": "Alice Brown",
            "contactEmail": "alice@moorland.co.uk",
        })
        assert farm.id == "farm-004"

    async def test_create_batch(self, api):
        batch = await api.batches.create_batch({
            "farmId": "farm-002",
            "weight": 300,
            "grade": "Medium",
            "color": "Cream",
            "qualityScore": 88,
        })
        assert batch.id == "batch-005"
        assert batch.current_location == "Green Valley Wool"

    async def test_update_batch_status(self, api):
        batch = await api.batches.update_batch_status(
            "batch-003",
            StatusUpdate(status="Processed", location="Yorkshire Processing Co.",
                         handled_by="Yorkshire Team"),
        )
        assert batch.current_status == BatchStatus.PROCESSED
        assert len(batch.journey_history) == 4

    async def test_invalid_payload_never_sent(self, api, store, caplog):
        caplog.set_level(logging.ERROR, logger="wooltracer.client")
        with pytest.raises(ValidationError):
            await api.batches.create_batch({
                "farmId": "farm-001",
                "weight": 100,
                "grade": "Fine",
                "color": "White",
                "qualityScore": 0,
            })

        assert len(await store.batch_ids()) == 4
        assert "Invalid BatchCreate payload" in caplog.text
        assert "qualityScore" in caplog.text


class TestClientErrors:

    async def test_not_found_carries_server_message(self, api):
        with pytest.raises(ApiError) as exc_info:
            await api.batches.get_batch_by_id("batch-999")

        error = exc_info.value
        assert error.message == "Batch not found: batch-999"
        assert error.status_code == 404
        assert error.error_code == "RESOURCE_NOT_FOUND"
        assert not isinstance(error, NetworkError)

    async def test_unknown_farm_on_create(self, api):
        with pytest.raises(ApiError) as exc_info:
            await api.batches.create_batch({
                "farmId": "farm-999",
                "weight": 100,
                "grade": "Fine",
                "color": "White",
                "qualityScore": 90,
            })
        assert exc_info.value.status_code == 422
        assert exc_info.value.message == "Referenced farm does not exist: farm-999"

    async def test_network_error(self):
        def _refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        async with WoolTracerClient(
            base_url="http://test/api", transport=httpx.MockTransport(_refuse)
        ) as api:
            with pytest.raises(NetworkError) as exc_info:
                await api.farms.get_all_farms()

        assert exc_info.value.status_code is None
        assert "Connection refused" in exc_info.value.message

    async def test_error_without_json_body(self):
        def _bad_gateway(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="upstream down")

        async with WoolTracerClient(
            base_url="http://test/api", transport=httpx.MockTransport(_bad_gateway)
        ) as api:
            with pytest.raises(ApiError) as exc_info:
                await api.analytics.get_dashboard_overview()

        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "Bad Gateway"
