# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""SQLAlchemy models for the Scolaris record store."""

from scolaris.infrastructure.database.models.base import (
    Base,
    IdMixin,
    TimestampMixin,
    generate_id,
)
from scolaris.infrastructure.database.models.school import (
    GENDERS,
    PROGRESS_VALUES,
    Class,
    Grade,
    Student,
    Subject,
    Teacher,
    Trimester,
)
from scolaris.infrastructure.database.models.user import USER_ROLES, User

__all__ = [
    "Base",
    "IdMixin",
    "TimestampMixin",
    "generate_id",
    "GENDERS",
    "PROGRESS_VALUES",
    "USER_ROLES",
    "Teacher",
    "Class",
    "Student",
    "Subject",
    "Trimester",
    "Grade",
    "User",
]
