# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Declarative base and shared column mixins."""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import DateTime, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from scolaris.utils.datetime import utc_now


def generate_id() -> str:
    """Generate a new surrogate identifier."""
    return str(uuid4())


class Base(DeclarativeBase):
    """Declarative base for all Scolaris models."""


class IdMixin:
    """Adds a store-assigned string primary key."""

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)


class TimestampMixin:
    """Adds created_at/updated_at columns.

    Defaults are computed in Python so ordering by creation time keeps
    microsecond precision on every backend.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )
