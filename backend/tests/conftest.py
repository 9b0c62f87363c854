"""Pytest configuration and fixtures for WoolTracer tests.

Provides record stores (in-memory and SQLite-backed), an API client bound
to the ASGI app, and the typed client wrapper.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from wooltracer.client import WoolTracerClient
from wooltracer.database import build_engine, create_tables
from wooltracer.main import app
from wooltracer.store.deps import get_store
from wooltracer.store.memory import InMemoryRecordStore
from wooltracer.store.seed import seed_store
from wooltracer.store.sql import SqlRecordStore


# ── Record stores ────────────────────────────────────────────────

@pytest.fixture
def store() -> InMemoryRecordStore:
    """Fresh in-memory store holding the sample dataset."""
    return InMemoryRecordStore.with_sample_data()


@pytest.fixture
def empty_store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest_asyncio.fixture
async def sql_store() -> AsyncGenerator[SqlRecordStore, None]:
    """SQLite-backed store seeded with the sample dataset.

    The session is rolled back at teardown; nothing persists between tests.
    """
    engine = build_engine("sqlite+aiosqlite://")
    await create_tables(bind=engine)
    session_factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    async with session_factory() as session:
        store = SqlRecordStore(session)
        await seed_store(store)
        yield store
        await session.rollback()

    await engine.dispose()


# ── HTTP clients ─────────────────────────────────────────────────

@pytest_asyncio.fixture
async def client(store: InMemoryRecordStore) -> AsyncGenerator[AsyncClient, None]:
    """Raw HTTP client with the record store dependency overridden."""
    app.dependency_overrides[get_store] = lambda: store

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def api(store: InMemoryRecordStore) -> AsyncGenerator[WoolTracerClient, None]:
    """Typed WoolTracer client talking to the app in-process."""
    app.dependency_overrides[get_store] = lambda: store

    async with WoolTracerClient(
        base_url="http://test/api",
        transport=ASGITransport(app=app),
    ) as api:
        yield api

    app.dependency_overrides.clear()


# ── Test Markers ─────────────────────────────────────────────────

def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "api: HTTP API tests")
    config.addinivalue_line("markers", "integration: Integration tests")
