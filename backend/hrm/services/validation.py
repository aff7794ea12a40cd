"""Field-level validation for employee requests.

Length and range constraints are declared on ``EmployeeConstraints`` and
run by pydantic; the required/not-blank rule depends on create vs update
and is checked by hand. Runs before any storage access so an invalid
request never causes a write. Every violation is reported, ordered by field.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError
from pydantic.alias_generators import to_camel

from hrm.schemas.employees import EmployeeRequest
from hrm.services.errors import FieldViolation

REQUIRED_FIELDS = ("name", "department", "role")
NAME_MIN_LENGTH, NAME_MAX_LENGTH = 2, 100

LABELS = {
    "employee_id": "Employee ID",
    "name": "Name",
    "department": "Department",
    "role": "Role",
    "skills": "Skills",
    "skill_level": "Skill level",
    "experience": "Experience",
    "category": "Category",
    "availability": "Availability",
    "performance_rating": "Performance rating",
    "status": "Status",
}


class EmployeeConstraints(BaseModel):
    employee_id: Optional[str] = Field(None, max_length=255)
    name: Optional[str] = Field(
        None, min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH
    )
    department: Optional[str] = Field(None, max_length=50)
    role: Optional[str] = Field(None, max_length=100)
    skills: Optional[str] = Field(None, max_length=1000)
    skill_level: Optional[int] = Field(None, ge=1, le=10)
    experience: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    category: Optional[str] = Field(None, max_length=50)
    availability: Optional[str] = Field(None, max_length=50)
    performance_rating: Optional[float] = Field(None, ge=0, le=10, allow_inf_nan=False)
    status: Optional[str] = Field(None, max_length=50)


_FIELD_ORDER = {name: i for i, name in enumerate(EmployeeConstraints.model_fields)}


def _message(field: str, error: dict[str, Any]) -> str:
    label = LABELS.get(field, field)
    ctx = error.get("ctx") or {}
    kind = error["type"]

    if field == "name" and kind in ("string_too_short", "string_too_long"):
        return (
            f"Name must be between {NAME_MIN_LENGTH} and "
            f"{NAME_MAX_LENGTH} characters"
        )
    if kind == "string_too_long":
        return f"{label} must not exceed {ctx['max_length']} characters"
    if kind == "greater_than_equal":
        if ctx["ge"] == 0:
            return f"{label} cannot be negative"
        return f"{label} must be at least {ctx['ge']}"
    if kind == "less_than_equal":
        return f"{label} must be at most {ctx['le']}"
    if kind == "finite_number":
        return f"{label} must be a finite number"
    return error["msg"]


def _missing_or_blank(
    request: EmployeeRequest, partial: bool
) -> list[FieldViolation]:
    violations = []
    for field in REQUIRED_FIELDS:
        value = getattr(request, field)
        if (value is None and not partial) or (value is not None and not value.strip()):
            violations.append(FieldViolation(field, f"{LABELS[field]} is required"))
    return violations


def validate_employee_request(
    request: EmployeeRequest, partial: bool = False
) -> list[FieldViolation]:
    """Check ``request`` against the employee field constraints.

    With ``partial=False`` (create) name, department and role are required.
    With ``partial=True`` (update) every field is optional, but any field
    that is present must still be valid. A blank employee id is legal: it
    means "no identifier".
    """
    violations = _missing_or_blank(request, partial)
    already_reported = {v.field for v in violations}

    try:
        EmployeeConstraints.model_validate(request.model_dump())
    except ValidationError as e:
        for error in e.errors():
            field = str(error["loc"][0])
            if field in already_reported:
                continue
            violations.append(FieldViolation(field, _message(field, error)))

    violations.sort(key=lambda v: _FIELD_ORDER[v.field])
    return [FieldViolation(to_camel(v.field), v.message) for v in violations]
