"""Create employees table

Revision ID: 001
Revises: None
Create Date: 2024-01-15 00:00:00.000000+00:00

What:  Creates the `employees` table holding the employee list.
How:   Generic types only (UUID, VARCHAR, FLOAT) so the same migration runs
       on PostgreSQL and SQLite.

Rollback: downgrade() drops the table entirely (destructive, all data lost).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the employees table. Column docs live in employee_api/models/employee.py."""
    op.create_table(
        "employees",
        sa.Column(
            "id",
            sa.Uuid(as_uuid=True),
            nullable=False,
            comment="Unique identifier, assigned once on insert",
        ),
        sa.Column("name", sa.String(255), nullable=False, comment="Employee full name"),
        sa.Column(
            "location",
            sa.String(255),
            nullable=False,
            comment="Office or city the employee works from",
        ),
        sa.Column("position", sa.String(255), nullable=False, comment="Job title"),
        sa.Column("salary", sa.Float(), nullable=False, comment="Salary amount"),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """Drop the employees table. All employee data is permanently lost."""
    op.drop_table("employees")
