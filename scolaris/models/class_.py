# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Class request and response models."""

from datetime import datetime

from pydantic import BaseModel, Field

from scolaris.models.common import ORMModel, PartialUpdateRequest
from scolaris.models.teacher import TeacherSummary


class ClassCreateRequest(BaseModel):
    """Request to create a class."""

    name: str = Field(min_length=1, max_length=100)
    teacher_id: str = Field(min_length=1)


class ClassUpdateRequest(PartialUpdateRequest):
    """Partial class update."""

    non_nullable = ("name", "teacher_id")

    name: str | None = Field(default=None, min_length=1, max_length=100)
    teacher_id: str | None = Field(default=None, min_length=1)


class ClassSummary(ORMModel):
    """Class name, as shown inside other records."""

    id: str
    name: str


class ClassResponse(ORMModel):
    """Class details with its teacher.

    teacher is None when the referenced teacher has been deleted.
    """

    id: str
    name: str
    teacher_id: str
    teacher: TeacherSummary | None = None
    created_at: datetime
    updated_at: datetime


class ClassListResponse(BaseModel):
    """List of classes."""

    count: int
    items: list[ClassResponse]
