# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Grade domain package.

This package provides the grade consistency engine and grade views:
- Reference and student/class checks on create and partial update
- Flat, grouped-by-subject and per-teacher grade listings
"""

from scolaris.domains.grade.service import (
    EntityNotFoundError,
    GradeNotFoundError,
    GradeService,
    GradeServiceError,
    ReferenceNotFoundError,
    StudentNotInClassError,
    TeacherNotFoundError,
)

__all__ = [
    "GradeService",
    "GradeServiceError",
    "EntityNotFoundError",
    "GradeNotFoundError",
    "ReferenceNotFoundError",
    "StudentNotInClassError",
    "TeacherNotFoundError",
]
