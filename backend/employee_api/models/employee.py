"""
Employee List Backend — Employee SQLAlchemy Model
===================================================

What:  ORM model representing the `employees` table.
Why:   Maps Python objects to rows for type-safe database operations.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for migrations.
Who:   Used by EmployeeRepository for CRUD and by Alembic for schema management.

Table Design Rationale:
    - UUID primary key, assigned in Python on insert: opaque, unique, and
      portable across PostgreSQL and SQLite (generic `Uuid` type)
    - name / location / position: required, non-null strings
    - salary: required, non-null float
    No timestamps or status columns: the record is exactly the four business
    fields plus its identifier.
"""

import uuid

from sqlalchemy import Float, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from employee_api.database import Base


class Employee(Base):
    """
    A single employee record.

    Lifecycle:
        1. Inserted with the four business fields; id assigned on flush
        2. Updated in place: all four fields overwritten together, id unchanged
        3. Hard-deleted (no soft-delete flag, no tombstone)
    """

    __tablename__ = "employees"

    # ── Primary Key ───────────────────────────────────────────────────────
    # Exposed on the wire as "_id"
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier, assigned once on insert",
    )

    # ── Business Fields ───────────────────────────────────────────────────
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Employee full name",
    )
    location: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Office or city the employee works from",
    )
    position: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Job title",
    )
    salary: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        comment="Salary amount",
    )

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return f"<Employee(id={self.id}, name='{self.name}', position='{self.position}')>"
