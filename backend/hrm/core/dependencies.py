from hrm.core.database import async_session_factory
from hrm.services.employee_service import EmployeeService


def get_employee_service() -> EmployeeService:
    return EmployeeService(async_session_factory)
