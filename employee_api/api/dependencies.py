"""
Dependency wiring for FastAPI endpoints.

The chain is explicit: get_db_session() opens one AsyncSession per request,
get_employee_service() hands that session to an EmployeeService, and the
routes receive the service. Tests swap either link through
app.dependency_overrides.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.db.engine import get_db_session
from employee_api.services.employee_service import EmployeeService


async def get_employee_service(
    db: AsyncSession = Depends(get_db_session),
) -> EmployeeService:
    return EmployeeService(db)
