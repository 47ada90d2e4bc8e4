"""
Employee repository: the storage adapter behind the employee resource.

Each write commits its own unit of work, so a save or delete is atomic per
record. SQLAlchemy exceptions are not caught here; the service layer decides
how they surface to the client.
"""

import logging
import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.models.employee import Employee

logger = logging.getLogger(__name__)


class EmployeeRepository:
    """
    CRUD operations on the `employees` table.

    Provides: find_all, find_by_id, insert, save, delete.
    """

    def __init__(self, session: AsyncSession):
        """
        Args:
            session: Request-scoped AsyncSession from get_db_session
        """
        self.session = session

    async def find_all(self) -> List[Employee]:
        """Return every employee, in whatever order the database yields them."""
        result = await self.session.execute(select(Employee))
        return list(result.scalars().all())

    async def find_by_id(self, employee_id: uuid.UUID) -> Optional[Employee]:
        """Return the employee with this id, or None if there is none."""
        return await self.session.get(Employee, employee_id)

    async def insert(self, fields: Dict[str, Any]) -> Employee:
        """
        Persist a new employee.

        Args:
            fields: name, location, position and salary

        Returns:
            The stored Employee with its newly assigned id
        """
        employee = Employee(**fields)
        self.session.add(employee)
        await self.session.commit()
        logger.info("Created employee %s", employee.id)
        return employee

    async def save(self, employee: Employee) -> Employee:
        """Persist changes made to an already-stored employee."""
        self.session.add(employee)
        await self.session.commit()
        logger.info("Updated employee %s", employee.id)
        return employee

    async def delete(self, employee: Employee) -> None:
        """Remove an employee permanently."""
        await self.session.delete(employee)
        await self.session.commit()
        logger.info("Deleted employee %s", employee.id)
