"""Employee service.

CRUD over employee records. Every public method runs in its own session
and transaction, so the employee id uniqueness check and the write that
depends on it commit or roll back together. The unique constraint on
``employees.employee_id`` backs the check up when two writers race.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from hrm.schemas.employees import EmployeeRequest, EmployeeResponse
from hrm.services.employee_repository import EmployeeRepository
from hrm.services.errors import (
    DuplicateEmployeeIdError,
    EmployeeNotFoundError,
    ValidationFailure,
)
from hrm.services.mapping import (
    apply_update,
    normalize_employee_id,
    on_create,
    on_update,
    to_entity,
    to_response,
)
from hrm.services.validation import validate_employee_request

logger = logging.getLogger(__name__)


def _raise_for_violations(request: EmployeeRequest, partial: bool) -> None:
    violations = validate_employee_request(request, partial=partial)
    if violations:
        raise ValidationFailure(violations)


class EmployeeService:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def create_employee(self, request: EmployeeRequest) -> EmployeeResponse:
        _raise_for_violations(request, partial=False)
        employee_id = normalize_employee_id(request.employee_id)

        try:
            async with self.session_factory() as db, db.begin():
                repo = EmployeeRepository(db)
                if employee_id is not None and await repo.employee_id_taken(employee_id):
                    raise DuplicateEmployeeIdError(employee_id)

                employee = to_entity(request)
                on_create(employee)
                await repo.add(employee)
                response = to_response(employee)
        except IntegrityError as e:
            raise DuplicateEmployeeIdError(employee_id) from e

        logger.info("Created employee %s (employee_id=%s)", response.id, employee_id)
        return response

    async def get_employee(self, pk: int) -> EmployeeResponse:
        async with self.session_factory() as db:
            employee = await EmployeeRepository(db).get(pk)
            if employee is None:
                raise EmployeeNotFoundError(pk)
            return to_response(employee)

    async def get_employee_by_employee_id(self, employee_id: str) -> EmployeeResponse:
        async with self.session_factory() as db:
            employee = await EmployeeRepository(db).get_by_employee_id(employee_id)
            if employee is None:
                raise EmployeeNotFoundError(employee_id)
            return to_response(employee)

    async def list_employees(self) -> list[EmployeeResponse]:
        async with self.session_factory() as db:
            employees = await EmployeeRepository(db).list_all()
            return [to_response(e) for e in employees]

    async def update_employee(
        self, pk: int, request: EmployeeRequest
    ) -> EmployeeResponse:
        _raise_for_violations(request, partial=True)
        employee_id = normalize_employee_id(request.employee_id)

        try:
            async with self.session_factory() as db, db.begin():
                repo = EmployeeRepository(db)
                employee = await repo.get(pk)
                if employee is None:
                    raise EmployeeNotFoundError(pk)

                if employee_id is not None and await repo.employee_id_taken(
                    employee_id, exclude_id=pk
                ):
                    raise DuplicateEmployeeIdError(employee_id)

                apply_update(employee, request)
                on_update(employee)
                await db.flush()
                response = to_response(employee)
        except IntegrityError as e:
            raise DuplicateEmployeeIdError(employee_id) from e

        logger.info("Updated employee %s", pk)
        return response

    async def delete_employee(self, pk: int) -> None:
        async with self.session_factory() as db, db.begin():
            repo = EmployeeRepository(db)
            employee = await repo.get(pk)
            if employee is None:
                raise EmployeeNotFoundError(pk)
            await repo.delete(employee)

        logger.info("Deleted employee %s", pk)
