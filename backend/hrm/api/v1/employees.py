from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from hrm.core.dependencies import get_employee_service
from hrm.schemas.employees import EmployeeRequest, EmployeeResponse
from hrm.services.employee_service import EmployeeService

router = APIRouter(prefix="/employees", tags=["employees"])

# Ids are BIGINT; anything outside that range can never match a row
EmployeePk = Annotated[int, Path(ge=1, le=2**63 - 1)]


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    data: EmployeeRequest,
    service: EmployeeService = Depends(get_employee_service),
):
    """Create a new employee record."""
    return await service.create_employee(data)


@router.get("", response_model=list[EmployeeResponse])
async def list_employees(
    service: EmployeeService = Depends(get_employee_service),
):
    """List all employees."""
    return await service.list_employees()


@router.get("/employee-id/{employee_id:path}", response_model=EmployeeResponse)
async def get_employee_by_employee_id(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
):
    """Get an employee by their human-assigned employee ID."""
    return await service.get_employee_by_employee_id(employee_id)


@router.get("/{pk}", response_model=EmployeeResponse)
async def get_employee(
    pk: EmployeePk,
    service: EmployeeService = Depends(get_employee_service),
):
    """Get a specific employee by ID."""
    return await service.get_employee(pk)


@router.put("/{pk}", response_model=EmployeeResponse)
async def update_employee(
    pk: EmployeePk,
    data: EmployeeRequest,
    service: EmployeeService = Depends(get_employee_service),
):
    """Update an employee. Fields left out of the body keep their stored value."""
    return await service.update_employee(pk, data)


@router.delete("/{pk}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_employee(
    pk: EmployeePk,
    service: EmployeeService = Depends(get_employee_service),
):
    """Permanently delete an employee."""
    await service.delete_employee(pk)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
