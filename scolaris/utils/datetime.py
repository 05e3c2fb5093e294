# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""DateTime utilities for Scolaris.

All timestamps are stored in UTC and all Python datetimes are
timezone-aware, so naive/aware comparisons never mix.

Usage:
    from scolaris.utils.datetime import utc_now

    created_at = mapped_column(DateTime(timezone=True), default=utc_now)
"""

from datetime import date, datetime, timezone


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime.

    Returns:
        Timezone-aware datetime representing current UTC time.
    """
    return datetime.now(timezone.utc)


def utc_today() -> date:
    """Get the current UTC calendar date."""
    return utc_now().date()


def is_past(value: date) -> bool:
    """Check whether a calendar date lies strictly before today (UTC).

    Args:
        value: Date to check.

    Returns:
        True if the date is in the past.
    """
    return value < utc_today()
