# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Subject domain package."""

from scolaris.domains.subject.service import (
    SubjectNameExistsError,
    SubjectNotFoundError,
    SubjectService,
    SubjectServiceError,
)

__all__ = [
    "SubjectService",
    "SubjectServiceError",
    "SubjectNotFoundError",
    "SubjectNameExistsError",
]
