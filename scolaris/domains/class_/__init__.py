# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Class domain package.

This package provides class management functionality including:
- Class CRUD operations
- Teacher assignment checks
- Class name uniqueness
"""

from scolaris.domains.class_.service import (
    ClassNameExistsError,
    ClassNotFoundError,
    ClassService,
    ClassServiceError,
    TeacherNotFoundError,
)

__all__ = [
    "ClassService",
    "ClassServiceError",
    "ClassNotFoundError",
    "ClassNameExistsError",
    "TeacherNotFoundError",
]
