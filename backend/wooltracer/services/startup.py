"""Application lifespan: logging, tables and the sample dataset.

Usage:
    from wooltracer.services.startup import lifespan
    app = FastAPI(lifespan=lifespan, ...)

Configuration (.env):
    STORE_BACKEND=memory|sql
    SEED_ON_STARTUP=true
    LOG_LEVEL=INFO
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from wooltracer.config import settings
from wooltracer.database import async_session, create_tables, engine
from wooltracer.store.deps import build_memory_store
from wooltracer.store.seed import seed_store
from wooltracer.store.sql import SqlRecordStore

logger = logging.getLogger("wooltracer.startup")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=(level or settings.log_level).upper(), format=LOG_FORMAT)


async def init_sql_store(seed: bool) -> None:
    """Create tables and, when asked, load the sample dataset into an empty database."""
    await create_tables()
    if not seed:
        return

    async with async_session() as db:
        try:
            await seed_store(SqlRecordStore(db))
            await db.commit()
        except Exception:
            await db.rollback()
            raise


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("Starting WoolTracer (store backend: %s)", settings.store_backend)

    if settings.store_backend == "sql":
        await init_sql_store(seed=settings.seed_on_startup)
    else:
        app.state.record_store = build_memory_store()

    yield

    if settings.store_backend == "sql":
        await engine.dispose()
    logger.info("WoolTracer stopped")
