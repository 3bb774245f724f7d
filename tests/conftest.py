import os

# Point the application at SQLite before anything imports employee_api.config
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["CREATE_TABLES"] = "false"

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from employee_api.db.engine import build_engine, get_db_session, init_models
from employee_api.main import app


@pytest.fixture
async def db_engine(tmp_path):
    """A fresh SQLite database file with the employees table, per test."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'employees.db'}")
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
async def client(session_maker):
    """HTTP client wired to the app, with every request using the test database."""

    async def override_get_db_session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides = {}
