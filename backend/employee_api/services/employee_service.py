"""
Employee List Backend — Employee Service (Resource Handler)
=============================================================

What:  List / read / create / update / delete for the employee resource.
Why:   Keeps the "what happens" of each route independent of HTTP, so it can
       be tested against a mocked storage adapter.
How:   Wraps an EmployeeRepository, converts missing records into
       NotFoundError and driver exceptions into application exceptions.
Who:   Built per request by `get_employee_service`; called by route handlers.

Error translation:
    record missing                    → NotFoundError (404)
    IntegrityError / DataError        → ValidationError (400)  [writes only]
    any other SQLAlchemyError         → DatabaseError (500)
    application exceptions            → propagate unchanged
"""

import logging
import uuid
from typing import List

from fastapi import Depends
from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.database import get_db_session
from employee_api.exceptions import DatabaseError, NotFoundError, ValidationError
from employee_api.models.employee import Employee
from employee_api.repositories.employee_repository import EmployeeRepository
from employee_api.schemas.employee import (
    DeleteResponse,
    EmployeeCreate,
    EmployeeResponse,
    EmployeeUpdate,
)

logger = logging.getLogger(__name__)

EMPLOYEE_NOT_FOUND = "Employee not found"


def _not_found(employee_id: uuid.UUID) -> NotFoundError:
    return NotFoundError(
        resource="employee",
        resource_id=str(employee_id),
        message=EMPLOYEE_NOT_FOUND,
    )


def _to_response(employee: Employee) -> EmployeeResponse:
    return EmployeeResponse(
        id=employee.id,
        name=employee.name,
        location=employee.location,
        position=employee.position,
        salary=employee.salary,
    )


class EmployeeService:
    """
    Business logic layer for employee operations.

    Responsibilities:
        - list_employees(): every stored employee
        - get_employee(): single record with not-found handling
        - create_employee(): insert with store-assigned id
        - update_employee(): wholesale overwrite of the four business fields
        - delete_employee(): hard delete with confirmation
    """

    def __init__(self, repository: EmployeeRepository):
        self.repository = repository

    async def list_employees(self) -> List[EmployeeResponse]:
        """
        Return all employees.

        Raises:
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            employees = await self.repository.find_all()
        except SQLAlchemyError as e:
            logger.error("Database error listing employees: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve employees. Please try again.",
                context={"error_type": type(e).__name__},
            )
        return [_to_response(employee) for employee in employees]

    async def get_employee(self, employee_id: uuid.UUID) -> EmployeeResponse:
        """
        Retrieve a single employee by id.

        Raises:
            NotFoundError: No employee with that id (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        employee = await self._find(employee_id)
        return _to_response(employee)

    async def create_employee(self, payload: EmployeeCreate) -> EmployeeResponse:
        """
        Store a new employee; the store assigns its id.

        Args:
            payload: Validated name, location, position and salary

        Raises:
            ValidationError: The store rejected the record (→ 400)
            DatabaseError: Insert failed for any other reason (→ 500)
        """
        try:
            employee = await self.repository.insert(payload.model_dump())
        except (IntegrityError, DataError) as e:
            logger.warning("Employee rejected by the store: %s", str(e))
            raise ValidationError(
                message="Employee record was rejected: check that every field is present and well-formed.",
                context={"error_type": type(e).__name__},
            )
        except SQLAlchemyError as e:
            logger.error("Database error creating employee: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the employee. Please try again.",
                context={"error_type": type(e).__name__},
            )
        return _to_response(employee)

    async def update_employee(self, payload: EmployeeUpdate) -> EmployeeResponse:
        """
        Overwrite all four business fields of an existing employee.

        The id never changes. There is no partial update: the payload is a
        complete record and replaces the stored one field by field.

        Raises:
            NotFoundError: No employee with payload.id (→ 404)
            ValidationError: The store rejected the new values (→ 400)
            DatabaseError: Lookup or save failed (→ 500)
        """
        employee = await self._find(payload.id)

        employee.name = payload.name
        employee.location = payload.location
        employee.position = payload.position
        employee.salary = payload.salary

        try:
            employee = await self.repository.save(employee)
        except (IntegrityError, DataError) as e:
            logger.warning("Employee update %s rejected by the store: %s", payload.id, str(e))
            raise ValidationError(
                message="Employee record was rejected: check that every field is present and well-formed.",
                context={"employee_id": str(payload.id), "error_type": type(e).__name__},
            )
        except SQLAlchemyError as e:
            logger.error("Database error updating employee %s: %s", payload.id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not update the employee. Please try again.",
                context={"employee_id": str(payload.id), "error_type": type(e).__name__},
            )
        return _to_response(employee)

    async def delete_employee(self, employee_id: uuid.UUID) -> DeleteResponse:
        """
        Permanently remove an employee.

        Returns:
            Confirmation message (not the deleted record)

        Raises:
            NotFoundError: No employee with that id (→ 404)
            DatabaseError: Lookup or delete failed (→ 500)
        """
        employee = await self._find(employee_id)
        try:
            await self.repository.delete(employee)
        except SQLAlchemyError as e:
            logger.error("Database error deleting employee %s: %s", employee_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete the employee. Please try again.",
                context={"employee_id": str(employee_id), "error_type": type(e).__name__},
            )
        return DeleteResponse(message="Employee deleted successfully")

    async def _find(self, employee_id: uuid.UUID) -> Employee:
        """Look up an employee or raise NotFoundError."""
        try:
            employee = await self.repository.find_by_id(employee_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching employee %s: %s", employee_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the employee. Please try again.",
                context={"employee_id": str(employee_id), "error_type": type(e).__name__},
            )
        if employee is None:
            raise _not_found(employee_id)
        return employee


def get_employee_service(
    db: AsyncSession = Depends(get_db_session),
) -> EmployeeService:
    """FastAPI dependency: a service bound to this request's session."""
    return EmployeeService(EmployeeRepository(db))
