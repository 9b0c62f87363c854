"""Management CLI for the record store.

Usage:
    python -m wooltracer.cli init-db      # Create tables (SQL backend)
    python -m wooltracer.cli seed         # Load the sample dataset into an empty database
    python -m wooltracer.cli summary      # Print the analytics summary as JSON
"""

import asyncio
import sys

from wooltracer.config import settings
from wooltracer.database import async_session, create_tables
from wooltracer.services.analytics import build_summary
from wooltracer.services.startup import configure_logging, init_sql_store
from wooltracer.store.base import RecordStore
from wooltracer.store.deps import build_memory_store
from wooltracer.store.sql import SqlRecordStore


async def _summary_for(store: RecordStore) -> str:
    summary = build_summary(
        await store.list_farms(),
        await store.list_batches(),
        await store.list_facilities(),
    )
    return summary.model_dump_json(by_alias=True, indent=2)


async def _summary() -> str:
    if settings.store_backend != "sql":
        return await _summary_for(build_memory_store())
    async with async_session() as db:
        return await _summary_for(SqlRecordStore(db))


def init_db():
    """Create every table on the configured database."""
    asyncio.run(create_tables())
    print("  Tables created.")


def seed():
    """Create tables and load the sample farms, batches and facilities."""
    asyncio.run(init_sql_store(seed=True))
    print("  Seed complete.")


def summary():
    print(asyncio.run(_summary()))


if __name__ == "__main__":
    configure_logging()
    cmd = sys.argv[1] if len(sys.argv) > 1 else ""
    if cmd == "init-db":
        init_db()
    elif cmd == "seed":
        seed()
    elif cmd == "summary":
        summary()
    else:
        print("Usage: python -m wooltracer.cli [init-db|seed|summary]")
