"""
FastAPI Application Entry Point
=============================================================================
CONCEPT: FastAPI Application Lifecycle

  1. Startup: configure logging, verify the database, create tables
  2. Request handling: process HTTP requests using routes
  3. Shutdown: close pooled database connections

We use the `lifespan` context manager pattern (recommended over the older
`@app.on_event("startup")` pattern).

Run with: uvicorn employee_api.main:app --reload --host 0.0.0.0 --port 8000
=============================================================================
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from employee_api.api.health import router as health_router
from employee_api.api.router import api_router
from employee_api.config import settings
from employee_api.db.engine import engine, init_models
from employee_api.observability.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Everything before `yield` runs on startup.
    Everything after `yield` runs on shutdown.
    """
    # === STARTUP ===
    setup_logging()
    logger.info("app_starting", app_name=settings.app_name, env=settings.app_env)

    async with engine.begin() as conn:
        await conn.execute(text("SELECT 1"))
    logger.info("database_connection_verified")

    if settings.create_tables:
        await init_models()
        logger.info("database_tables_ready")

    yield

    # === SHUTDOWN ===
    await engine.dispose()
    logger.info("database_connections_closed")


# =============================================================================
# Create the FastAPI application
# =============================================================================
app = FastAPI(
    title=settings.app_name,
    description="CRUD service for employee records with unique email addresses.",
    version="1.0.0",
    lifespan=lifespan,
)


# =============================================================================
# Middleware
# =============================================================================
# In production, restrict `allow_origins` to your actual frontend domain.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Mount Routers
# =============================================================================
app.include_router(health_router)
app.include_router(api_router, prefix=settings.api_prefix)
