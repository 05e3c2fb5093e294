# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Teacher request and response models."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from scolaris.models.common import Gender, ORMModel, PartialUpdateRequest, PastDate


class TeacherCreateRequest(BaseModel):
    """Request to create a teacher."""

    last_name: str = Field(min_length=1, max_length=100)
    first_name: str = Field(min_length=1, max_length=100)
    birth_date: PastDate
    address: str | None = Field(default=None, max_length=250)
    gender: Gender


class TeacherUpdateRequest(PartialUpdateRequest):
    """Partial teacher update."""

    non_nullable = ("last_name", "first_name", "birth_date", "gender")

    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    birth_date: PastDate | None = None
    address: str | None = Field(default=None, max_length=250)
    gender: Gender | None = None


class TeacherSummary(ORMModel):
    """Teacher name, as shown inside other records."""

    id: str
    last_name: str
    first_name: str


class TeacherResponse(ORMModel):
    """Teacher details."""

    id: str
    last_name: str
    first_name: str
    birth_date: date
    address: str | None = None
    gender: Gender
    created_at: datetime
    updated_at: datetime


class TeacherListResponse(BaseModel):
    """List of teachers."""

    count: int
    items: list[TeacherResponse]
