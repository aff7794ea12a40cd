"""Create employees table

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "employees",
        sa.Column("id", sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column("employee_id", sa.String(255), nullable=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("department", sa.String(50), nullable=False),
        sa.Column("role", sa.String(100), nullable=False),
        sa.Column("skills", sa.String(1000), nullable=True),
        sa.Column("skill_level", sa.Integer, nullable=False, server_default="1"),
        sa.Column("experience", sa.Float, nullable=False, server_default="0"),
        sa.Column("category", sa.String(50), nullable=False, server_default="Full-time"),
        sa.Column("availability", sa.String(50), nullable=False, server_default="Available"),
        sa.Column("performance_rating", sa.Float, nullable=False, server_default="0"),
        sa.Column("status", sa.String(50), nullable=False, server_default="Present"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        # NULLs never collide, so any number of employees may lack an employee_id
        sa.UniqueConstraint("employee_id", name="uq_employees_employee_id"),
    )


def downgrade() -> None:
    op.drop_table("employees")
