"""
Alembic Environment
=============================================================================
Runs the revisions in migrations/versions against the configured database.

The URL comes from `sqlalchemy.url` in alembic.ini when set, otherwise from
DATABASE_URL via the application settings. The engine is async (asyncpg or
aiosqlite), so migrations run inside a connection's run_sync() bridge.

Run: alembic upgrade head
=============================================================================
"""

import asyncio

from alembic import context
from sqlalchemy.ext.asyncio import create_async_engine

from employee_api.config import settings
from employee_api.db import models  # noqa: F401  (registers tables on Base.metadata)
from employee_api.db.engine import Base

config = context.config
target_metadata = Base.metadata


def _database_url() -> str:
    return config.get_main_option("sqlalchemy.url") or settings.database_url


def run_migrations_offline() -> None:
    """Emit SQL to stdout instead of executing it (alembic upgrade --sql)."""
    context.configure(
        url=_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_sync_migrations(connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    connectable = create_async_engine(_database_url())
    async with connectable.connect() as connection:
        await connection.run_sync(_run_sync_migrations)
    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
