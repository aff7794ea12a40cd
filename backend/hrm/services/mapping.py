"""Conversions between the wire shapes and the ``Employee`` entity.

Also holds the create/update timestamp hooks. The service calls them
explicitly; nothing here touches the database.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from hrm.models.employee import (
    DEFAULT_AVAILABILITY,
    DEFAULT_CATEGORY,
    DEFAULT_EXPERIENCE,
    DEFAULT_PERFORMANCE_RATING,
    DEFAULT_SKILL_LEVEL,
    DEFAULT_STATUS,
    Employee,
)
from hrm.schemas.employees import EmployeeRequest, EmployeeResponse

# Fields copied verbatim from request to entity on update
_UPDATABLE_FIELDS = (
    "name",
    "department",
    "role",
    "skills",
    "skill_level",
    "experience",
    "category",
    "availability",
    "performance_rating",
    "status",
)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def normalize_employee_id(value: Optional[str]) -> Optional[str]:
    """Blank identifiers are stored as absent."""
    if value is None or not value.strip():
        return None
    return value


def _or_default(value, default):
    return default if value is None else value


def to_entity(request: EmployeeRequest) -> Employee:
    return Employee(
        employee_id=normalize_employee_id(request.employee_id),
        name=request.name,
        department=request.department,
        role=request.role,
        skills=request.skills,
        skill_level=_or_default(request.skill_level, DEFAULT_SKILL_LEVEL),
        experience=_or_default(request.experience, DEFAULT_EXPERIENCE),
        category=_or_default(request.category, DEFAULT_CATEGORY),
        availability=_or_default(request.availability, DEFAULT_AVAILABILITY),
        performance_rating=_or_default(
            request.performance_rating, DEFAULT_PERFORMANCE_RATING
        ),
        status=_or_default(request.status, DEFAULT_STATUS),
    )


def apply_update(employee: Employee, request: EmployeeRequest) -> None:
    """Overwrite every field present in ``request``; leave the rest alone."""
    if request.employee_id is not None:
        employee.employee_id = normalize_employee_id(request.employee_id)
    for field in _UPDATABLE_FIELDS:
        value = getattr(request, field)
        if value is not None:
            setattr(employee, field, value)


def to_response(employee: Employee) -> EmployeeResponse:
    return EmployeeResponse.model_validate(employee)


def on_create(employee: Employee, now: Optional[datetime] = None) -> None:
    now = now or utcnow()
    employee.created_at = now
    employee.updated_at = now


def on_update(employee: Employee, now: Optional[datetime] = None) -> None:
    """Refresh ``updated_at``, keeping it strictly increasing."""
    now = now or utcnow()
    if employee.updated_at is not None:
        previous = _as_utc(employee.updated_at)
        if now <= previous:
            now = previous + timedelta(microseconds=1)
    employee.updated_at = now
