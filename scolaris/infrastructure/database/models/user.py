# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""User accounts for API authentication."""

from sqlalchemy import CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column

from scolaris.infrastructure.database.models.base import Base, IdMixin, TimestampMixin

USER_ROLES = ("admin", "teacher", "student")


class User(IdMixin, TimestampMixin, Base):
    """An API user. The password is only ever stored as a bcrypt hash."""

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("role IN ('admin', 'teacher', 'student')", name="valid_user_role"),
    )

    username: Mapped[str] = mapped_column(String(30), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="student")

    def __repr__(self) -> str:
        return f"<User {self.id} {self.username} ({self.role})>"
