# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Grade request and response models.

A grade references a student, a class, a subject, a teacher and a
trimester by identifier. Responses resolve each reference to a short
summary; a summary is None when its record no longer exists.
"""

from datetime import datetime
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, Field

from scolaris.models.class_ import ClassSummary
from scolaris.models.common import ORMModel, PartialUpdateRequest
from scolaris.models.student import StudentSummary, StudentWithClass
from scolaris.models.subject import SubjectSummary
from scolaris.models.teacher import TeacherSummary
from scolaris.models.trimester import TrimesterSummary

Progress = Literal["up", "stable", "down"]

REFERENCE_FIELDS = ("student_id", "class_id", "subject_id", "teacher_id", "trimester_id")


class GradeCreateRequest(BaseModel):
    """Request to record a grade. All five references are required."""

    student_id: str = Field(min_length=1)
    class_id: str = Field(min_length=1)
    subject_id: str = Field(min_length=1)
    teacher_id: str = Field(min_length=1)
    trimester_id: str = Field(min_length=1)
    note: float = Field(ge=0, le=20)
    coefficient: float = Field(gt=0)
    comment: str | None = Field(default=None, max_length=500)
    progress: Progress | None = None


class GradeUpdateRequest(PartialUpdateRequest):
    """Partial grade update.

    Only provided fields are validated and written. References, note and
    coefficient cannot be cleared; comment and progress can.
    """

    non_nullable = REFERENCE_FIELDS + ("note", "coefficient")

    student_id: str | None = Field(default=None, min_length=1)
    class_id: str | None = Field(default=None, min_length=1)
    subject_id: str | None = Field(default=None, min_length=1)
    teacher_id: str | None = Field(default=None, min_length=1)
    trimester_id: str | None = Field(default=None, min_length=1)
    note: float | None = Field(default=None, ge=0, le=20)
    coefficient: float | None = Field(default=None, gt=0)
    comment: str | None = Field(default=None, max_length=500)
    progress: Progress | None = None


class GradeFilters(BaseModel):
    """Equality filters for grade listings. Absent filters match everything."""

    student_id: str | None = None
    class_id: str | None = None
    subject_id: str | None = None
    trimester_id: str | None = None
    teacher_id: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class GradeResponse(ORMModel):
    """Grade with its five references resolved."""

    id: str
    student_id: str
    class_id: str
    subject_id: str
    teacher_id: str
    trimester_id: str
    student: StudentSummary | None = None
    class_: ClassSummary | None = Field(
        default=None,
        validation_alias=AliasChoices("class_", "class"),
        serialization_alias="class",
    )
    subject: SubjectSummary | None = None
    teacher: TeacherSummary | None = None
    trimester: TrimesterSummary | None = None
    note: float
    coefficient: float
    comment: str | None = None
    progress: Progress | None = None
    created_at: datetime
    updated_at: datetime


class GradeListResponse(BaseModel):
    count: int
    items: list[GradeResponse]


class SubjectGradeEntry(BaseModel):
    """One grade inside a subject group, with names inline."""

    id: str
    student: StudentSummary | None = None
    teacher: TeacherSummary | None = None
    note: float
    coefficient: float


class SubjectGradeGroup(BaseModel):
    """All filtered grades for one subject."""

    subject_id: str
    subject: SubjectSummary | None = None
    grades: list[SubjectGradeEntry]


class SubjectGroupedGradesResponse(BaseModel):
    """Grades grouped by subject.

    count is the number of subjects, total_grades the number of grades.
    """

    count: int
    total_grades: int
    items: list[SubjectGradeGroup]


class TeacherGradeEntry(BaseModel):
    """One grade given by a teacher to a student."""

    id: str
    subject: SubjectSummary | None = None
    trimester: TrimesterSummary | None = None
    note: float
    coefficient: float


class StudentGradesGroup(BaseModel):
    """A student and the grades one teacher gave them."""

    student_id: str
    student: StudentWithClass | None = None
    grades: list[TeacherGradeEntry]


class TeacherStudentGradesResponse(BaseModel):
    count: int
    items: list[StudentGradesGroup]
