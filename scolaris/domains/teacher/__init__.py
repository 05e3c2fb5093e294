# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Teacher domain package."""

from scolaris.domains.teacher.service import (
    ClassNotFoundError,
    TeacherNotFoundError,
    TeacherService,
    TeacherServiceError,
)

__all__ = [
    "TeacherService",
    "TeacherServiceError",
    "TeacherNotFoundError",
    "ClassNotFoundError",
]
