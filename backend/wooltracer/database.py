"""Database engine, session factory, and declarative base.

Only used when ``settings.store_backend == "sql"``; the in-memory record
store never touches the engine.

  - Base      → every WoolTracer table (farms, wool_batches, journey_steps, …)
  - get_db()  → request-scoped session, committed on success, rolled back on error
"""

from typing import AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from wooltracer.config import settings


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine; SQLite URLs share one connection (tests, local dev)."""
    if url.startswith("sqlite"):
        return create_async_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(
        url,
        echo=echo,
        pool_size=20,
        max_overflow=10,
    )


engine = build_engine(settings.database_url, echo=settings.debug)

async_session = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)


# ── Base class ──────────────────────────────────────────────

class Base(DeclarativeBase):
    """All WoolTracer tables."""
    pass


# ── Session dependency ──────────────────────────────────────

async def get_db() -> AsyncIterator[AsyncSession]:
    """Yield a session; the whole request is one transaction."""
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def create_tables(bind: AsyncEngine | None = None) -> None:
    """Create every table registered on Base (idempotent)."""
    import wooltracer.models  # noqa: F401  (register mappers)

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
