from datetime import datetime, timezone

from sqlalchemy import BigInteger, DateTime, Float, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from hrm.core.database import Base

DEFAULT_SKILL_LEVEL = 1
DEFAULT_EXPERIENCE = 0.0
DEFAULT_CATEGORY = "Full-time"  # Full-time, Part-time, Contract
DEFAULT_AVAILABILITY = "Available"  # Available, Busy, Unavailable
DEFAULT_PERFORMANCE_RATING = 0.0
DEFAULT_STATUS = "Present"  # Present, Absent


class Employee(Base):
    __tablename__ = "employees"
    __table_args__ = (
        UniqueConstraint("employee_id", name="uq_employees_employee_id"),
        # never hand out the id of a deleted row again
        {"sqlite_autoincrement": True},
    )

    # SQLite only autoincrements INTEGER primary keys
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True
    )
    employee_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    department: Mapped[str] = mapped_column(String(50), nullable=False)
    role: Mapped[str] = mapped_column(String(100), nullable=False)
    skills: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    skill_level: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=DEFAULT_SKILL_LEVEL,
        server_default=str(DEFAULT_SKILL_LEVEL),
    )
    experience: Mapped[float] = mapped_column(
        Float, nullable=False, default=DEFAULT_EXPERIENCE, server_default="0"
    )
    category: Mapped[str] = mapped_column(
        String(50), nullable=False, default=DEFAULT_CATEGORY, server_default=DEFAULT_CATEGORY
    )
    availability: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default=DEFAULT_AVAILABILITY,
        server_default=DEFAULT_AVAILABILITY,
    )
    performance_rating: Mapped[float] = mapped_column(
        Float, nullable=False, default=DEFAULT_PERFORMANCE_RATING, server_default="0"
    )
    status: Mapped[str] = mapped_column(
        String(50), nullable=False, default=DEFAULT_STATUS, server_default=DEFAULT_STATUS
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"<Employee id={self.id} employee_id={self.employee_id!r}>"
