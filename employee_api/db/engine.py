"""
Database Engine & Session Management
=============================================================================
CONCEPT: Async SQLAlchemy with Connection Pooling

KEY CONCEPTS:
  1. Engine — The connection factory. Creates and manages DB connections.
  2. Session — A "workspace" for DB operations. Groups queries into transactions.
  3. Connection Pool — Reuses DB connections instead of creating new ones per request.
  4. Async — asyncpg (PostgreSQL) or aiosqlite (SQLite) for non-blocking I/O.

POOL SETTINGS:
  - pool_size: connections kept ready at all times
  - max_overflow: extra connections allowed during traffic spikes
  - pool_pre_ping=True: check a connection is alive before using it
  - pool_recycle=3600: replace connections after 1 hour

SQLite manages its own pool, so the sizing arguments are only passed to
server databases.
=============================================================================
"""

from collections.abc import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from employee_api.config import settings


def build_engine(database_url: str, **overrides) -> AsyncEngine:
    """Create an async engine with pool settings suited to the backend."""
    options = {"echo": settings.db_echo, "pool_pre_ping": True}
    if not database_url.startswith("sqlite"):
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_recycle=3600,
        )
    options.update(overrides)
    return create_async_engine(database_url, **options)


engine = build_engine(settings.database_url)

# Session factory — creates new AsyncSession instances
# expire_on_commit=False means objects remain usable after commit
# (without this, accessing attributes after commit would trigger a lazy load error)
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# Base class for all ORM models
class Base(DeclarativeBase):
    pass


async def init_models(bind: AsyncEngine | None = None) -> None:
    """
    Create all tables that don't exist yet.

    This is the quick-start path for development and tests. Production
    deployments apply the Alembic revisions in migrations/ instead and
    set CREATE_TABLES=false.
    """
    # Import models so they register themselves on Base.metadata
    from employee_api.db import models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """
    FastAPI dependency that provides a database session per request.

    The `async with` ensures the session is properly closed after the request,
    even if an error occurs (like a try/finally block).
    """
    async with async_session_maker() as session:
        try:
            yield session
        finally:
            await session.close()
