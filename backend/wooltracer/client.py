"""Async HTTP client for the WoolTracer API.

Usage:
    async with WoolTracerClient() as api:
        farms = await api.farms.get_all_farms()
        batch = await api.batches.update_batch_status(
            "batch-001",
            StatusUpdate(status="Spun", location="Traditional Spinners Ltd.",
                         handled_by="Spinners Team"),
        )

Payloads are validated locally with the same schemas the server uses, so a
bad form never leaves the process.  Every failure is logged and raised:
  - NetworkError  → transport failure (connection refused, timeout, …)
  - ApiError      → non-2xx response; ``message`` is the server's message
  - ValidationError → payload rejected locally; nothing is sent
No call is retried.  To drop a superseded request, cancel the task awaiting it.
"""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from wooltracer.config import settings
from wooltracer.middleware.exceptions import format_validation_errors
from wooltracer.schemas.analytics import AnalyticsSummary, DashboardOverview, FarmBatchSummary
from wooltracer.schemas.batch import (
    BatchCreate,
    BatchProgress,
    RecentUpdate,
    StatusUpdate,
    WoolBatch,
)
from wooltracer.schemas.facility import FacilityOut
from wooltracer.schemas.farm import Farm, FarmCreate
from wooltracer.services.queries import batches_for_farm

logger = logging.getLogger("wooltracer.client")


class ApiError(Exception):
    """The API answered with an error status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_code: str | None = None,
        details: dict | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details
        super().__init__(message)


class NetworkError(ApiError):
    """The request never got an answer."""


def _error_from_response(response: httpx.Response) -> ApiError:
    message = response.reason_phrase or f"HTTP {response.status_code}"
    error_code = None
    details = None
    try:
        data = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict):
        message = data.get("message") or data.get("detail") or message
        error_code = data.get("code")
        details = data.get("details")

    return ApiError(
        str(message),
        status_code=response.status_code,
        error_code=error_code,
        details=details,
    )


def _payload(schema: type[BaseModel], body: BaseModel | dict) -> dict:
    if isinstance(body, schema):
        model = body
    else:
        try:
            model = schema.model_validate(body)
        except ValidationError as exc:
            logger.error(
                "Invalid %s payload, request not sent: %s",
                schema.__name__, format_validation_errors(exc),
            )
            raise
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


class WoolTracerClient:

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._http = httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            timeout=timeout if timeout is not None else settings.api_timeout_seconds,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )
        self.farms = FarmAPI(self)
        self.batches = BatchAPI(self)
        self.facilities = FacilityAPI(self)
        self.analytics = AnalyticsAPI(self)

    async def __aenter__(self) -> "WoolTracerClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.TransportError as exc:
            logger.error("Network error on %s %s: %s", method, path, exc)
            raise NetworkError(f"Network error: {exc}") from exc

        if response.is_error:
            error = _error_from_response(response)
            logger.error(
                "API error on %s %s: %s %s",
                method, path, error.status_code, error.message,
            )
            raise error

        return response.json()


# ── Farm API ─────────────────────────────────────────────────

class FarmAPI:

    def __init__(self, client: WoolTracerClient):
        self._client = client

    async def get_all_farms(self, search: str | None = None) -> list[Farm]:
        params = {"search": search} if search else None
        data = await self._client.request("GET", "/farms/", params=params)
        return [Farm.model_validate(item) for item in data]

    async def get_farm_by_id(self, farm_id: str) -> Farm:
        data = await self._client.request("GET", f"/farms/{farm_id}")
        return Farm.model_validate(data)

    async def get_farm_summary(self, farm_id: str) -> FarmBatchSummary:
        data = await self._client.request("GET", f"/farms/{farm_id}/summary")
        return FarmBatchSummary.model_validate(data)

    async def create_farm(self, farm: FarmCreate | dict) -> Farm:
        data = await self._client.request("POST", "/farms/", json=_payload(FarmCreate, farm))
        return Farm.model_validate(data)


# ── Wool batch API ───────────────────────────────────────────

class BatchAPI:

    def __init__(self, client: WoolTracerClient):
        self._client = client

    async def get_all_batches(self, search: str | None = None) -> list[WoolBatch]:
        params = {"search": search} if search else None
        data = await self._client.request("GET", "/wool-batches/", params=params)
        return [WoolBatch.model_validate(item) for item in data]

    async def get_batches_by_farm_id(self, farm_id: str) -> list[WoolBatch]:
        return batches_for_farm(await self.get_all_batches(), farm_id)

    async def get_batch_by_id(self, batch_id: str) -> WoolBatch:
        data = await self._client.request("GET", f"/wool-batches/{batch_id}")
        return WoolBatch.model_validate(data)

    async def get_batch_progress(self, batch_id: str) -> BatchProgress:
        data = await self._client.request("GET", f"/wool-batches/{batch_id}/progress")
        return BatchProgress.model_validate(data)

    async def create_batch(self, batch: BatchCreate | dict) -> WoolBatch:
        data = await self._client.request(
            "POST", "/wool-batches/", json=_payload(BatchCreate, batch)
        )
        return WoolBatch.model_validate(data)

    async def update_batch_status(
        self, batch_id: str, update: StatusUpdate | dict
    ) -> WoolBatch:
        data = await self._client.request(
            "PATCH", f"/wool-batches/{batch_id}/status", json=_payload(StatusUpdate, update)
        )
        return WoolBatch.model_validate(data)


# ── Facilities API ───────────────────────────────────────────

class FacilityAPI:

    def __init__(self, client: WoolTracerClient):
        self._client = client

    async def get_all_facilities(self) -> list[FacilityOut]:
        data = await self._client.request("GET", "/processing-facilities/")
        return [FacilityOut.model_validate(item) for item in data]


# ── Analytics API ────────────────────────────────────────────

class AnalyticsAPI:

    def __init__(self, client: WoolTracerClient):
        self._client = client

    async def get_analytics_data(self) -> AnalyticsSummary:
        data = await self._client.request("GET", "/analytics-summary/")
        return AnalyticsSummary.model_validate(data)

    async def get_dashboard_overview(self) -> DashboardOverview:
        data = await self._client.request("GET", "/dashboard-summary/")
        return DashboardOverview.model_validate(data)

    async def get_recent_updates(self, limit: int | None = None) -> list[RecentUpdate]:
        params = {"limit": limit} if limit else None
        data = await self._client.request("GET", "/journey-updates/recent", params=params)
        return [RecentUpdate.model_validate(item) for item in data]
