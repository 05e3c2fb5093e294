# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student request and response models."""

from datetime import date, datetime

from pydantic import AliasChoices, BaseModel, Field

from scolaris.models.class_ import ClassSummary
from scolaris.models.common import Gender, ORMModel, PartialUpdateRequest, PastDate


class StudentCreateRequest(BaseModel):
    """Request to create a student in a class."""

    last_name: str = Field(min_length=1, max_length=100)
    first_name: str = Field(min_length=1, max_length=100)
    birth_date: PastDate
    address: str | None = Field(default=None, max_length=250)
    gender: Gender
    class_id: str = Field(min_length=1)


class StudentUpdateRequest(PartialUpdateRequest):
    """Partial student update. Changing class_id moves the student."""

    non_nullable = ("last_name", "first_name", "birth_date", "gender", "class_id")

    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    birth_date: PastDate | None = None
    address: str | None = Field(default=None, max_length=250)
    gender: Gender | None = None
    class_id: str | None = Field(default=None, min_length=1)


class StudentSummary(ORMModel):
    """Student name, as shown inside other records."""

    id: str
    last_name: str
    first_name: str


class StudentWithClass(StudentSummary):
    """Student name with the class they currently belong to."""

    class_: ClassSummary | None = Field(
        default=None,
        validation_alias=AliasChoices("class_", "class"),
        serialization_alias="class",
    )


class StudentResponse(ORMModel):
    """Student details."""

    id: str
    last_name: str
    first_name: str
    birth_date: date
    address: str | None = None
    gender: Gender
    class_id: str
    class_: ClassSummary | None = Field(
        default=None,
        validation_alias=AliasChoices("class_", "class"),
        serialization_alias="class",
    )
    created_at: datetime
    updated_at: datetime


class StudentListResponse(BaseModel):
    """List of students."""

    count: int
    items: list[StudentResponse]
