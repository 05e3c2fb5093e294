# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Trimester domain package."""

from scolaris.domains.trimester.service import (
    TrimesterNotFoundError,
    TrimesterService,
    TrimesterServiceError,
)

__all__ = [
    "TrimesterService",
    "TrimesterServiceError",
    "TrimesterNotFoundError",
]
