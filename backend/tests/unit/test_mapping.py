from __future__ import annotations

from datetime import datetime, timedelta, timezone

from hrm.models.employee import Employee
from hrm.schemas.employees import EmployeeRequest
from hrm.services.mapping import (
    apply_update,
    normalize_employee_id,
    on_create,
    on_update,
    to_entity,
    to_response,
)


def _employee(**overrides) -> Employee:
    employee = to_entity(
        EmployeeRequest(
            employee_id="E1",
            name="Ana",
            department="Eng",
            role="Dev",
            skills="Python",
            skill_level=7,
            experience=3.5,
            performance_rating=8.0,
        )
    )
    for key, value in overrides.items():
        setattr(employee, key, value)
    return employee


def test_normalize_employee_id():
    assert normalize_employee_id(None) is None
    assert normalize_employee_id("") is None
    assert normalize_employee_id("   ") is None
    assert normalize_employee_id("E1") == "E1"
    assert normalize_employee_id(" E1 ") == " E1 "


def test_to_entity_applies_defaults():
    employee = to_entity(EmployeeRequest(name="Ana", department="Eng", role="Dev"))

    assert employee.employee_id is None
    assert employee.skills is None
    assert employee.skill_level == 1
    assert employee.experience == 0.0
    assert employee.category == "Full-time"
    assert employee.availability == "Available"
    assert employee.performance_rating == 0.0
    assert employee.status == "Present"


def test_to_entity_keeps_supplied_values():
    employee = to_entity(
        EmployeeRequest(
            name="Ana",
            department="Eng",
            role="Dev",
            skill_level=9,
            category="Contract",
            availability="Busy",
            status="Absent",
        )
    )
    assert employee.skill_level == 9
    assert employee.category == "Contract"
    assert employee.availability == "Busy"
    assert employee.status == "Absent"


def test_to_entity_normalizes_blank_employee_id():
    employee = to_entity(
        EmployeeRequest(employee_id=" ", name="Ana", department="Eng", role="Dev")
    )
    assert employee.employee_id is None


def test_apply_update_only_touches_present_fields():
    employee = _employee(category="Contract")

    apply_update(employee, EmployeeRequest(role="Lead", skill_level=9))

    assert employee.role == "Lead"
    assert employee.skill_level == 9
    assert employee.name == "Ana"
    assert employee.employee_id == "E1"
    assert employee.skills == "Python"
    # defaults are not re-applied on update
    assert employee.category == "Contract"


def test_apply_update_blank_employee_id_clears_it():
    employee = _employee()
    apply_update(employee, EmployeeRequest(employee_id=""))
    assert employee.employee_id is None


def test_apply_update_absent_employee_id_keeps_it():
    employee = _employee()
    apply_update(employee, EmployeeRequest(name="Bea"))
    assert employee.employee_id == "E1"


def test_on_create_sets_equal_timestamps():
    employee = _employee()
    now = datetime(2026, 1, 1, tzinfo=timezone.utc)

    on_create(employee, now)

    assert employee.created_at == now
    assert employee.updated_at == now


def test_on_update_refreshes_updated_at_only():
    employee = _employee()
    created = datetime(2026, 1, 1, tzinfo=timezone.utc)
    on_create(employee, created)

    later = created + timedelta(hours=1)
    on_update(employee, later)

    assert employee.created_at == created
    assert employee.updated_at == later


def test_on_update_always_moves_forward():
    employee = _employee()
    stamp = datetime(2026, 1, 1, tzinfo=timezone.utc)
    on_create(employee, stamp)

    on_update(employee, stamp)

    assert employee.updated_at > stamp


def test_on_update_handles_naive_stored_timestamp():
    employee = _employee()
    employee.created_at = employee.updated_at = datetime(2026, 1, 1)

    on_update(employee, datetime(2025, 12, 31, tzinfo=timezone.utc))

    assert employee.updated_at == datetime(
        2026, 1, 1, 0, 0, 0, 1, tzinfo=timezone.utc
    )


def test_to_response_maps_every_field():
    employee = _employee(id=42)
    on_create(employee, datetime(2026, 1, 1, tzinfo=timezone.utc))

    response = to_response(employee)

    assert response.id == 42
    assert response.employee_id == "E1"
    assert response.skills == "Python"
    assert response.skill_level == 7
    assert response.experience == 3.5
    assert response.performance_rating == 8.0
    assert response.created_at == response.updated_at


def test_response_serializes_camel_case():
    employee = _employee(id=1)
    on_create(employee, datetime(2026, 1, 1, tzinfo=timezone.utc))

    body = to_response(employee).model_dump(by_alias=True)

    assert {"employeeId", "skillLevel", "performanceRating", "createdAt", "updatedAt"} <= set(body)


def test_request_accepts_camel_and_snake_case():
    camel = EmployeeRequest.model_validate({"employeeId": "E1", "skillLevel": 3})
    snake = EmployeeRequest.model_validate({"employee_id": "E1", "skill_level": 3})
    assert camel == snake
