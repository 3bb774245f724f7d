"""
Employee API Endpoints
=============================================================================
CONCEPT: RESTful API Design

HTTP methods map to CRUD operations on the "employees" resource:
    POST   /employees          = Create   → 201, or 409 if the email is taken
    GET    /employees          = List     → 200 (empty array when none)
    GET    /employees/{id}     = Read     → 200, or 404 with an empty body
    PUT    /employees/{id}     = Replace  → 200, 404, or 409
    DELETE /employees/{id}     = Delete   → 200 always (idempotent)

CONCEPT: Pydantic Schemas
FastAPI uses Pydantic models for:
  - Request validation: empty names or a malformed email are rejected
    with 422 before the service ever runs
  - Response serialization: Python's snake_case fields go out as the
    camelCase JSON keys clients expect (firstName, lastName)
=============================================================================
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from employee_api.api.dependencies import get_employee_service
from employee_api.services.employee_service import EmployeeService
from employee_api.services.results import ErrorKind, ServiceResult

router = APIRouter(prefix="/employees", tags=["Employees"])

DELETED_MESSAGE = "Employee deleted successfully!"


# =============================================================================
# Pydantic Schemas — Define request/response shapes
# =============================================================================
class EmployeePayload(BaseModel):
    """
    Request body for create and update.

    `id` is never read from the body: the database assigns it on create and
    the URL carries it on update.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,      # accept first_name as well as firstName
        str_strip_whitespace=True,
    )

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")


class EmployeeResponse(BaseModel):
    """Response schema for employee data."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,       # Allow creating from SQLAlchemy model
    )

    id: int
    first_name: str
    last_name: str
    email: str


# =============================================================================
# Outcome → HTTP mapping
# =============================================================================
def _failure_response(result: ServiceResult) -> Response:
    """
    Translate a failed ServiceResult into an HTTP response.

    NOT_FOUND answers with an empty 404 body; CONFLICT raises a 409 whose
    detail explains which email clashed.
    """
    if result.error is ErrorKind.CONFLICT:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=result.detail)
    return Response(status_code=status.HTTP_404_NOT_FOUND)


# =============================================================================
# Endpoints
# =============================================================================
@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    payload: EmployeePayload,
    service: EmployeeService = Depends(get_employee_service),
):
    """Create an employee. The email must not be used by anyone else."""
    result = await service.create(**payload.model_dump())
    if not result.ok:
        return _failure_response(result)
    return EmployeeResponse.model_validate(result.value)


@router.get("", response_model=list[EmployeeResponse])
async def list_employees(service: EmployeeService = Depends(get_employee_service)):
    employees = await service.list_all()
    return [EmployeeResponse.model_validate(e) for e in employees]


@router.get("/search", response_model=EmployeeResponse)
async def search_employee(
    first_name: str = Query(..., alias="firstName", min_length=1),
    last_name: str = Query(..., alias="lastName", min_length=1),
    service: EmployeeService = Depends(get_employee_service),
):
    """
    Look an employee up by first and last name.

    Declared before /{employee_id} so "search" is never parsed as an id.
    """
    result = await service.find_by_name(first_name, last_name)
    if not result.ok:
        return _failure_response(result)
    return EmployeeResponse.model_validate(result.value)


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
):
    result = await service.get_by_id(employee_id)
    if not result.ok:
        return _failure_response(result)
    return EmployeeResponse.model_validate(result.value)


@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: int,
    payload: EmployeePayload,
    service: EmployeeService = Depends(get_employee_service),
):
    """
    Replace first name, last name and email of an existing employee.

    The id in the URL wins; the record keeps it across the update.
    """
    result = await service.update(employee_id, **payload.model_dump())
    if not result.ok:
        return _failure_response(result)
    return EmployeeResponse.model_validate(result.value)


@router.delete("/{employee_id}", response_class=PlainTextResponse)
async def delete_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
):
    """Delete an employee. Succeeds whether or not the id existed."""
    await service.delete_by_id(employee_id)
    return DELETED_MESSAGE
