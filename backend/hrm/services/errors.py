"""
Errors raised by the employee service layer.

These carry no HTTP knowledge; the API layer maps them to responses
in ``hrm.api.errors``.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldViolation:
    """A single field-level constraint failure, keyed by wire field name."""

    field: str
    message: str


class EmployeeServiceError(Exception):
    """Base error for the employee service."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ValidationFailure(EmployeeServiceError):
    """Raised when a request violates one or more field constraints."""

    def __init__(self, violations: list[FieldViolation]) -> None:
        super().__init__(
            "; ".join(v.message for v in violations) or "Validation failed"
        )
        self.violations = violations


class EmployeeNotFoundError(EmployeeServiceError):
    """Raised when no employee matches a numeric id or employee id."""

    def __init__(self, identifier: int | str) -> None:
        super().__init__(f"Employee not found with id: {identifier}")
        self.identifier = identifier


class DuplicateEmployeeIdError(EmployeeServiceError):
    """Raised when an employee id is already held by another employee."""

    def __init__(self, employee_id: str | None) -> None:
        super().__init__(f"Employee ID already exists: {employee_id}")
        self.employee_id = employee_id
