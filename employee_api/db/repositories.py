"""
Data Access Layer (Repositories)
=============================================================================
CONCEPT: Repository Pattern

The Repository pattern separates data access logic from business logic.
Instead of writing SQL queries directly in API routes or services,
we centralize all database operations here. This provides:

  1. Single source of truth — All queries in one place
  2. Testability — Mock the repository in tests, not the database
  3. Abstraction — The service doesn't care how rows are fetched

Each function here is a thin wrapper around a SQLAlchemy query. None of
them make business decisions: "does this email already exist?" is asked
here, but what to do about it is decided in the service layer.
=============================================================================
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.db.models import Employee


# =============================================================================
# Reads
# =============================================================================
async def get_employee_by_id(db: AsyncSession, employee_id: int) -> Employee | None:
    """Fetch an employee by primary key."""
    return await db.get(Employee, employee_id)


async def get_employee_by_email(db: AsyncSession, email: str) -> Employee | None:
    """Fetch an employee by their (unique) email address."""
    result = await db.execute(
        select(Employee).where(Employee.email == email)
    )
    return result.scalar_one_or_none()


async def find_employee_by_name(
    db: AsyncSession, first_name: str, last_name: str
) -> Employee | None:
    """
    Fetch the first employee matching both first and last name.

    Names are not unique, so the lowest id wins when several rows match.
    """
    result = await db.execute(
        select(Employee)
        .where(Employee.first_name == first_name, Employee.last_name == last_name)
        .order_by(Employee.id)
        .limit(1)
    )
    return result.scalar_one_or_none()


async def list_employees(db: AsyncSession) -> list[Employee]:
    """List every employee in insertion (id) order."""
    result = await db.execute(select(Employee).order_by(Employee.id))
    return list(result.scalars().all())


# =============================================================================
# Writes
# =============================================================================
async def create_employee(db: AsyncSession, **kwargs) -> Employee:
    """Insert a new employee row and return it with its assigned id."""
    employee = Employee(**kwargs)
    db.add(employee)
    await db.commit()
    await db.refresh(employee)
    return employee


async def update_employee(db: AsyncSession, employee: Employee, **kwargs) -> Employee:
    """Overwrite the given fields on an already-loaded employee."""
    for key, value in kwargs.items():
        setattr(employee, key, value)
    await db.commit()
    await db.refresh(employee)
    return employee


async def delete_employee(db: AsyncSession, employee_id: int) -> int:
    """
    Delete an employee by id.

    Returns the number of rows removed (0 or 1). Deleting a missing id is
    not an error.
    """
    result = await db.execute(delete(Employee).where(Employee.id == employee_id))
    await db.commit()
    return result.rowcount
