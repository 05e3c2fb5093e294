# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Initial school schema.

Revision ID: 001_initial
Revises: None
Create Date: 2025-01-06

Reference columns (class_id, teacher_id, the grade references) are
plain identifier columns without foreign keys: deleting a referenced
record never cascades and never fails.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column("id", sa.String(36), primary_key=True)


def _timestamp_columns() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Create school tables."""
    # ==========================================================================
    # 1. teachers
    # ==========================================================================
    op.create_table(
        "teachers",
        _id_column(),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("birth_date", sa.Date, nullable=False),
        sa.Column("address", sa.String(250), nullable=True),
        sa.Column("gender", sa.String(10), nullable=False),
        *_timestamp_columns(),
        sa.CheckConstraint("gender IN ('MALE', 'FEMALE')", name="valid_teacher_gender"),
    )

    # ==========================================================================
    # 2. classes
    # ==========================================================================
    op.create_table(
        "classes",
        _id_column(),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
        sa.Column("teacher_id", sa.String(36), nullable=False),
        *_timestamp_columns(),
    )
    op.create_index("ix_classes_teacher_id", "classes", ["teacher_id"])

    # ==========================================================================
    # 3. students
    # ==========================================================================
    op.create_table(
        "students",
        _id_column(),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("birth_date", sa.Date, nullable=False),
        sa.Column("address", sa.String(250), nullable=True),
        sa.Column("gender", sa.String(10), nullable=False),
        sa.Column("class_id", sa.String(36), nullable=False),
        *_timestamp_columns(),
        sa.CheckConstraint("gender IN ('MALE', 'FEMALE')", name="valid_student_gender"),
    )
    op.create_index("ix_students_class_id", "students", ["class_id"])

    # ==========================================================================
    # 4. subjects, trimesters
    # ==========================================================================
    op.create_table(
        "subjects",
        _id_column(),
        sa.Column("name", sa.String(250), nullable=False, unique=True),
        *_timestamp_columns(),
    )
    op.create_table(
        "trimesters",
        _id_column(),
        sa.Column("name", sa.String(10), nullable=False),
        sa.Column("date", sa.Date, nullable=False),
        *_timestamp_columns(),
    )

    # ==========================================================================
    # 5. grades
    # ==========================================================================
    op.create_table(
        "grades",
        _id_column(),
        sa.Column("student_id", sa.String(36), nullable=False),
        sa.Column("class_id", sa.String(36), nullable=False),
        sa.Column("subject_id", sa.String(36), nullable=False),
        sa.Column("teacher_id", sa.String(36), nullable=False),
        sa.Column("trimester_id", sa.String(36), nullable=False),
        sa.Column("note", sa.Float, nullable=False),
        sa.Column("coefficient", sa.Float, nullable=False),
        sa.Column("comment", sa.String(500), nullable=True),
        sa.Column("progress", sa.String(10), nullable=True),
        *_timestamp_columns(),
        sa.CheckConstraint("note >= 0 AND note <= 20", name="valid_grade_note"),
        sa.CheckConstraint("coefficient > 0", name="valid_grade_coefficient"),
    )
    for column in ("student_id", "class_id", "subject_id", "teacher_id", "trimester_id"):
        op.create_index(f"ix_grades_{column}", "grades", [column])
    op.create_index(
        "ix_grades_student_subject_trimester",
        "grades",
        ["student_id", "subject_id", "trimester_id"],
    )

    # ==========================================================================
    # 6. users
    # ==========================================================================
    op.create_table(
        "users",
        _id_column(),
        sa.Column("username", sa.String(30), nullable=False, unique=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False, server_default="student"),
        *_timestamp_columns(),
        sa.CheckConstraint("role IN ('admin', 'teacher', 'student')", name="valid_user_role"),
    )


def downgrade() -> None:
    """Drop school tables."""
    op.drop_table("users")
    op.drop_table("grades")
    op.drop_table("trimesters")
    op.drop_table("subjects")
    op.drop_table("students")
    op.drop_table("classes")
    op.drop_table("teachers")
