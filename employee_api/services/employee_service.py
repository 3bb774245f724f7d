"""
Employee Service (Business Rules)
=============================================================================
CONCEPT: Service Layer

Routes speak HTTP, repositories speak SQL. The service sits between them and
owns the business rules:

  1. No two employees may share an email address.
  2. Reads and updates of a missing id are a NOT_FOUND outcome, never a
     sentinel record.
  3. Updates never create rows: the id must already exist.
  4. Deletes are idempotent: deleting a missing id is fine.

CONCEPT: Check-then-write Race
The email check is a read followed by a write. Two concurrent creates with
the same email can both pass the read. The UNIQUE constraint on
employees.email catches the loser; we turn its IntegrityError into the same
CONFLICT outcome the pre-check produces.
=============================================================================
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.db import repositories as repo
from employee_api.db.models import Employee
from employee_api.observability.logging import get_logger
from employee_api.observability.metrics import record_operation
from employee_api.services.results import ServiceResult

logger = get_logger(__name__)


def _email_taken(email: str) -> str:
    return f"Employee already exists with given email: {email}"


# employees.id is a 32-bit INTEGER column; larger ids can never have been assigned
MAX_EMPLOYEE_ID = 2**31 - 1


def _missing(employee_id: int) -> str:
    return f"Employee {employee_id} not found"


def _storable(employee_id: int) -> bool:
    return 1 <= employee_id <= MAX_EMPLOYEE_ID


class EmployeeService:
    """Existence-checked CRUD over the employees table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, *, first_name: str, last_name: str, email: str) -> ServiceResult[Employee]:
        """
        Insert a new employee unless the email is already in use.

        Exactly one INSERT on success, none on conflict.
        """
        existing = await repo.get_employee_by_email(self.db, email)
        if existing is not None:
            logger.info("employee_conflict", email=email, existing_id=existing.id)
            record_operation("create", "conflict")
            return ServiceResult.conflict(_email_taken(email))

        try:
            employee = await repo.create_employee(
                self.db, first_name=first_name, last_name=last_name, email=email
            )
        except IntegrityError:
            # Lost the race against a concurrent create with the same email
            await self.db.rollback()
            logger.warning("employee_conflict_on_insert", email=email)
            record_operation("create", "conflict")
            return ServiceResult.conflict(_email_taken(email))

        logger.info("employee_created", employee_id=employee.id)
        record_operation("create")
        return ServiceResult.success(employee)

    async def list_all(self) -> list[Employee]:
        """Every employee, ordered by id. Empty list when there are none."""
        employees = await repo.list_employees(self.db)
        record_operation("list")
        return employees

    async def get_by_id(self, employee_id: int) -> ServiceResult[Employee]:
        employee = None
        if _storable(employee_id):
            employee = await repo.get_employee_by_id(self.db, employee_id)
        if employee is None:
            logger.info("employee_not_found", employee_id=employee_id)
            record_operation("get", "not_found")
            return ServiceResult.not_found(_missing(employee_id))
        record_operation("get")
        return ServiceResult.success(employee)

    async def find_by_name(self, first_name: str, last_name: str) -> ServiceResult[Employee]:
        employee = await repo.find_employee_by_name(self.db, first_name, last_name)
        if employee is None:
            record_operation("search", "not_found")
            return ServiceResult.not_found(f"No employee named {first_name} {last_name}")
        record_operation("search")
        return ServiceResult.success(employee)

    async def update(
        self, employee_id: int, *, first_name: str, last_name: str, email: str
    ) -> ServiceResult[Employee]:
        """
        Replace first name, last name and email of an existing employee.

        The id must already exist (NOT_FOUND otherwise, nothing is written),
        and the new email must not belong to a different employee.
        """
        employee = None
        if _storable(employee_id):
            employee = await repo.get_employee_by_id(self.db, employee_id)
        if employee is None:
            logger.info("employee_not_found", employee_id=employee_id)
            record_operation("update", "not_found")
            return ServiceResult.not_found(_missing(employee_id))

        if email != employee.email:
            owner = await repo.get_employee_by_email(self.db, email)
            if owner is not None and owner.id != employee_id:
                logger.info("employee_conflict", email=email, existing_id=owner.id)
                record_operation("update", "conflict")
                return ServiceResult.conflict(_email_taken(email))

        try:
            employee = await repo.update_employee(
                self.db, employee, first_name=first_name, last_name=last_name, email=email
            )
        except IntegrityError:
            await self.db.rollback()
            logger.warning("employee_conflict_on_update", employee_id=employee_id, email=email)
            record_operation("update", "conflict")
            return ServiceResult.conflict(_email_taken(email))

        logger.info("employee_updated", employee_id=employee.id)
        record_operation("update")
        return ServiceResult.success(employee)

    async def delete_by_id(self, employee_id: int) -> None:
        """Delete an employee. Missing ids are ignored."""
        removed = 0
        if _storable(employee_id):
            removed = await repo.delete_employee(self.db, employee_id)
        logger.info("employee_deleted", employee_id=employee_id, removed=removed)
        record_operation("delete")
