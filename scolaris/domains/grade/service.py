# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Grade service: the grade consistency engine and grade queries.

A grade references a student, a class, a subject, a teacher and a
trimester. Before any write the service checks that:

- every referenced record exists, and
- the referenced student currently belongs to the referenced class.

Creation checks every reference in a fixed order and stops at the first
failure:

    student -> class -> student in class -> subject -> teacher -> trimester

A partial update checks only what it changes. The student/class rule is
re-checked whenever either side changes, against the effective pair
(new value if provided, else the stored one).

Lookups run one after another on the request session. Nothing is
written when a check fails. A referenced record may still be deleted or
a student moved between the checks and the write; no lock is taken.

Reads do not re-check references: a grade whose referenced record was
deleted is returned with that summary set to None.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from scolaris.domains.grade.queries import group_by_student, group_by_subject
from scolaris.infrastructure.database.models import Grade, Student
from scolaris.infrastructure.database.repositories import (
    ClassRepository,
    GradeRepository,
    Repository,
    StudentRepository,
    SubjectRepository,
    TeacherRepository,
    TrimesterRepository,
)
from scolaris.models.grade import (
    GradeCreateRequest,
    GradeFilters,
    GradeResponse,
    GradeUpdateRequest,
    StudentGradesGroup,
    SubjectGradeGroup,
)

logger = logging.getLogger(__name__)


class GradeServiceError(Exception):
    """Base exception for grade service errors."""

    pass


class EntityNotFoundError(GradeServiceError):
    """Raised when a record does not exist for an identifier.

    Attributes:
        entity: Kind of record (student, class, subject, teacher,
            trimester or grade).
        entity_id: The identifier that was looked up.
    """

    def __init__(self, entity: str, entity_id: str, message: str | None = None) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(message or f"{entity.capitalize()} {entity_id} not found")


class ReferenceNotFoundError(EntityNotFoundError):
    """Raised when a grade references a record that does not exist."""

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(entity, entity_id, f"Referenced {entity} {entity_id} not found")


class GradeNotFoundError(EntityNotFoundError):
    """Raised when grade is not found."""

    def __init__(self, grade_id: str) -> None:
        super().__init__("grade", grade_id)


class TeacherNotFoundError(EntityNotFoundError):
    """Raised when the teacher of a teacher view is not found."""

    def __init__(self, teacher_id: str) -> None:
        super().__init__("teacher", teacher_id)


class StudentNotInClassError(GradeServiceError):
    """Raised when a grade's student does not belong to the grade's class.

    Attributes:
        student_id: Student referenced by the grade.
        class_id: Class referenced by the grade.
        actual_class_id: Class the student currently belongs to.
    """

    def __init__(self, student_id: str, class_id: str, actual_class_id: str) -> None:
        self.student_id = student_id
        self.class_id = class_id
        self.actual_class_id = actual_class_id
        super().__init__(f"Student {student_id} is not in the specified class {class_id}")


class GradeService:
    """Service for recording and querying grades.

    Attributes:
        db: Async database session.
    """

    def __init__(self, db: AsyncSession) -> None:
        """Initialize grade service.

        Args:
            db: Async database session shared by all repositories.
        """
        self.db = db
        self.grades = GradeRepository(db)
        self.students = StudentRepository(db)
        self.classes = ClassRepository(db)
        self.subjects = SubjectRepository(db)
        self.teachers = TeacherRepository(db)
        self.trimesters = TrimesterRepository(db)

    async def list_grades(self, filters: GradeFilters | None = None) -> list[GradeResponse]:
        """List grades, most recently created first.

        Args:
            filters: Equality filters, combined with AND.

        Returns:
            Matching grades with references resolved.
        """
        conditions = filters.as_dict() if filters else {}
        grades = await self.grades.find_populated(conditions)
        return [self._to_response(grade) for grade in grades]

    async def get_grade(self, grade_id: str) -> GradeResponse:
        """Get a grade by ID.

        Raises:
            GradeNotFoundError: If grade not found.
        """
        grade = await self.grades.find_by_id_populated(grade_id)
        if grade is None:
            raise GradeNotFoundError(grade_id)
        return self._to_response(grade)

    async def create_grade(self, request: GradeCreateRequest) -> GradeResponse:
        """Record a new grade after checking all five references.

        Args:
            request: Grade creation data.

        Returns:
            The created grade with references resolved.

        Raises:
            ReferenceNotFoundError: If a referenced record does not exist.
            StudentNotInClassError: If the student is not in the class.
        """
        student = await self._require(self.students, "student", request.student_id)
        await self._require(self.classes, "class", request.class_id)
        self._check_student_in_class(student, request.class_id)
        await self._require(self.subjects, "subject", request.subject_id)
        await self._require(self.teachers, "teacher", request.teacher_id)
        await self._require(self.trimesters, "trimester", request.trimester_id)

        grade = await self.grades.create(request.model_dump())

        logger.info("Created grade: %s for student %s", grade.id, grade.student_id)

        return await self._get_populated(grade.id)

    async def update_grade(self, grade_id: str, request: GradeUpdateRequest) -> GradeResponse:
        """Apply a partial update to a grade.

        Only the provided fields are checked. Unchanged references are not
        looked up again.

        Args:
            grade_id: Grade identifier.
            request: Fields to change.

        Returns:
            The updated grade with references resolved.

        Raises:
            GradeNotFoundError: If grade not found.
            ReferenceNotFoundError: If a changed reference does not exist.
            StudentNotInClassError: If the effective student is not in
                the effective class.
        """
        changes = request.changes()

        existing = await self.grades.find_by_id(grade_id)
        if existing is None:
            raise GradeNotFoundError(grade_id)

        student: Student | None = None
        if "student_id" in changes:
            student = await self._require(self.students, "student", changes["student_id"])

        if "class_id" in changes:
            await self._require(self.classes, "class", changes["class_id"])

        if "student_id" in changes or "class_id" in changes:
            if student is None:
                student = await self._require(self.students, "student", existing.student_id)
            self._check_student_in_class(student, changes.get("class_id", existing.class_id))

        for field, repository, entity in (
            ("subject_id", self.subjects, "subject"),
            ("teacher_id", self.teachers, "teacher"),
            ("trimester_id", self.trimesters, "trimester"),
        ):
            if field in changes:
                await self._require(repository, entity, changes[field])

        grade = await self.grades.find_by_id_and_update(grade_id, changes)
        if grade is None:
            raise GradeNotFoundError(grade_id)

        logger.info("Updated grade: %s (%s)", grade_id, ", ".join(sorted(changes)) or "no changes")

        return await self._get_populated(grade_id)

    async def delete_grade(self, grade_id: str) -> None:
        """Delete a grade.

        Raises:
            GradeNotFoundError: If grade not found.
        """
        grade = await self.grades.find_by_id_and_delete(grade_id)
        if grade is None:
            raise GradeNotFoundError(grade_id)

        logger.info("Deleted grade: %s", grade_id)

    async def list_grades_grouped_by_subject(
        self,
        class_id: str | None = None,
        trimester_id: str | None = None,
    ) -> list[SubjectGradeGroup]:
        """List grades grouped by subject.

        Groups appear in first-seen order of the newest-first grade list.
        Within a group, grades are sorted by student last name, then
        first name.

        Args:
            class_id: Optional class filter.
            trimester_id: Optional trimester filter.

        Returns:
            One group per subject present in the filtered grades.
        """
        grades = await self.grades.find_populated(
            {"class_id": class_id, "trimester_id": trimester_id}
        )
        return group_by_subject(grades)

    async def list_student_grades_for_teacher(self, teacher_id: str) -> list[StudentGradesGroup]:
        """List a teacher's grades grouped by student.

        Args:
            teacher_id: Teacher identifier.

        Returns:
            One group per student graded by the teacher, each holding only
            that teacher's grades, ordered by student, trimester, subject.

        Raises:
            TeacherNotFoundError: If teacher not found.
        """
        teacher = await self.teachers.find_by_id(teacher_id)
        if teacher is None:
            raise TeacherNotFoundError(teacher_id)

        grades = await self.grades.find_populated({"teacher_id": teacher_id})
        return group_by_student(grades)

    async def _require(self, repository: Repository[Any], entity: str, entity_id: str) -> Any:
        """Look up a referenced record.

        Raises:
            ReferenceNotFoundError: If not found.
        """
        record = await repository.find_by_id(entity_id)
        if record is None:
            logger.debug("Grade check failed: %s %s not found", entity, entity_id)
            raise ReferenceNotFoundError(entity, entity_id)
        return record

    @staticmethod
    def _check_student_in_class(student: Student, class_id: str) -> None:
        """Check the student currently belongs to the class.

        Raises:
            StudentNotInClassError: If the student's class differs.
        """
        if student.class_id != class_id:
            logger.debug(
                "Grade check failed: student %s is in class %s, not %s",
                student.id,
                student.class_id,
                class_id,
            )
            raise StudentNotInClassError(student.id, class_id, student.class_id)

    async def _get_populated(self, grade_id: str) -> GradeResponse:
        grade = await self.grades.find_by_id_populated(grade_id)
        if grade is None:
            raise GradeNotFoundError(grade_id)
        return self._to_response(grade)

    @staticmethod
    def _to_response(grade: Grade) -> GradeResponse:
        return GradeResponse.model_validate(grade)
