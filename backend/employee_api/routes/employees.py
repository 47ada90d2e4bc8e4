"""
Employee List Backend — Employee Route Handlers
=================================================

What:  The /api/employeelist resource: list, read, create, update, delete.
Why:   The frontend's only data API.
How:   FastAPI validates paths and bodies, then the handler delegates to
       EmployeeService, which is bound to a per-request database session.

Routes:
    GET    /api/employeelist        → 200 [Employee]
    GET    /api/employeelist/{id}   → 200 Employee | 404
    POST   /api/employeelist        → 201 Employee | 400
    PUT    /api/employeelist        → 200 Employee | 400 | 404
    DELETE /api/employeelist/{id}   → 200 {message} | 404

A malformed id (not a UUID) fails path validation and is answered with 400
by the RequestValidationError handler registered in main.py.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from employee_api.schemas.employee import (
    DeleteResponse,
    EmployeeCreate,
    EmployeeResponse,
    EmployeeUpdate,
    ErrorResponse,
)
from employee_api.services.employee_service import EmployeeService, get_employee_service

router = APIRouter(prefix="/api", tags=["Employees"])

# Failure modes shared by every route that touches the store
STORE_ERRORS = {
    500: {"description": "Storage fault", "model": ErrorResponse},
    503: {"description": "Storage not configured or unreachable", "model": ErrorResponse},
}


@router.get(
    "/employeelist",
    response_model=List[EmployeeResponse],
    responses=STORE_ERRORS,
    summary="List all employees",
)
async def list_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> List[EmployeeResponse]:
    return await service.list_employees()


@router.get(
    "/employeelist/{employee_id}",
    response_model=EmployeeResponse,
    responses={
        400: {"description": "Malformed employee id", "model": ErrorResponse},
        404: {"description": "Employee not found", "model": ErrorResponse},
        **STORE_ERRORS,
    },
    summary="Get a single employee by ID",
)
async def get_employee(
    employee_id: UUID,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    return await service.get_employee(employee_id)


@router.post(
    "/employeelist",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Missing or invalid fields", "model": ErrorResponse},
        **STORE_ERRORS,
    },
    summary="Create an employee",
    description="Stores a new employee. The identifier is assigned by the server.",
)
async def create_employee(
    payload: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    return await service.create_employee(payload)


@router.put(
    "/employeelist",
    response_model=EmployeeResponse,
    responses={
        400: {"description": "Missing or invalid fields", "model": ErrorResponse},
        404: {"description": "Employee not found", "model": ErrorResponse},
        **STORE_ERRORS,
    },
    summary="Replace an employee",
    description=(
        "Overwrites name, location, position and salary of the employee whose "
        "`_id` is given in the body. All four fields are required."
    ),
)
async def update_employee(
    payload: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    return await service.update_employee(payload)


@router.delete(
    "/employeelist/{employee_id}",
    response_model=DeleteResponse,
    responses={
        400: {"description": "Malformed employee id", "model": ErrorResponse},
        404: {"description": "Employee not found", "model": ErrorResponse},
        **STORE_ERRORS,
    },
    summary="Delete an employee",
)
async def delete_employee(
    employee_id: UUID,
    service: EmployeeService = Depends(get_employee_service),
) -> DeleteResponse:
    return await service.delete_employee(employee_id)
