"""Persistence gateway for employees.

Thin wrapper over an ``AsyncSession``. Transaction boundaries belong to
the caller; ``add`` flushes so the generated primary key is available.
"""

from typing import Optional

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from hrm.models.employee import Employee


class EmployeeRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, pk: int) -> Optional[Employee]:
        return await self.db.get(Employee, pk)

    async def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        result = await self.db.execute(
            select(Employee).where(Employee.employee_id == employee_id)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[Employee]:
        result = await self.db.execute(select(Employee).order_by(Employee.id))
        return list(result.scalars().all())

    async def employee_id_taken(
        self, employee_id: str, exclude_id: Optional[int] = None
    ) -> bool:
        """Whether ``employee_id`` belongs to an employee other than ``exclude_id``."""
        condition = Employee.employee_id == employee_id
        if exclude_id is not None:
            condition = condition & (Employee.id != exclude_id)
        result = await self.db.execute(select(exists().where(condition)))
        return bool(result.scalar())

    async def add(self, employee: Employee) -> Employee:
        self.db.add(employee)
        await self.db.flush()
        return employee

    async def delete(self, employee: Employee) -> None:
        await self.db.delete(employee)
        await self.db.flush()
