"""
API Router Aggregator
=============================================================================
CONCEPT: Router Organization

FastAPI lets you split routes across multiple files using APIRouter.
This file aggregates the business routers into one, which main.py mounts
under the configured API prefix (/api by default):
  - employees.py → /api/employees/*

Operational routes (health.py) live outside the prefix so probes and
scrapers have stable paths.
=============================================================================
"""

from fastapi import APIRouter

from employee_api.api.employees import router as employees_router

api_router = APIRouter()

api_router.include_router(employees_router)
