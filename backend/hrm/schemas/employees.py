from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictInt, field_validator
from pydantic.alias_generators import to_camel


class EmployeeRequest(BaseModel):
    """Payload for both create and update.

    ``None`` and an omitted key mean the same thing: the field is absent.
    Only types are checked here; length and range constraints are checked
    by ``validate_employee_request`` so both create and update report them
    as field violations.
    """

    employee_id: Optional[str] = None
    name: Optional[str] = None
    department: Optional[str] = None
    role: Optional[str] = None
    skills: Optional[str] = None
    skill_level: Optional[StrictInt] = None  # JSON true/false is not a skill level
    experience: Optional[float] = None
    category: Optional[str] = None
    availability: Optional[str] = None
    performance_rating: Optional[float] = None
    status: Optional[str] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class EmployeeResponse(BaseModel):
    id: int
    employee_id: Optional[str] = None
    name: str
    department: str
    role: str
    skills: Optional[str] = None
    skill_level: int
    experience: float
    category: str
    availability: str
    performance_rating: float
    status: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("created_at", "updated_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Some backends (SQLite) hand timestamps back without tzinfo
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
