# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student service for managing students and their class membership.

Moving a student to another class does not rewrite existing grades.
Grades recorded under the old class keep it; only new grades and grade
updates are checked against the student's current class.
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from scolaris.infrastructure.database.models import Student
from scolaris.infrastructure.database.repositories import (
    ClassRepository,
    StudentRepository,
)
from scolaris.models.student import (
    StudentCreateRequest,
    StudentResponse,
    StudentUpdateRequest,
)

logger = logging.getLogger(__name__)


class StudentServiceError(Exception):
    """Base exception for student service errors."""

    pass


class StudentNotFoundError(StudentServiceError):
    """Raised when student is not found."""

    pass


class ClassNotFoundError(StudentServiceError):
    """Raised when the student's class is not found."""

    pass


class StudentService:
    """Service for managing students.

    Attributes:
        db: Async database session.
    """

    def __init__(self, db: AsyncSession) -> None:
        """Initialize student service.

        Args:
            db: Async database session.
        """
        self.db = db
        self.students = StudentRepository(db)
        self.classes = ClassRepository(db)

    async def list_students(self, class_id: str | None = None) -> list[StudentResponse]:
        """List students ordered by last name, then first name.

        Args:
            class_id: Only students currently in this class.

        Returns:
            Students with their class summary.
        """
        students = await self.students.find(
            {"class_id": class_id},
            order_by=(Student.last_name, Student.first_name),
            options=(selectinload(Student.class_),),
        )
        return [StudentResponse.model_validate(s) for s in students]

    async def get_student(self, student_id: str) -> StudentResponse:
        """Get student by ID.

        Raises:
            StudentNotFoundError: If student not found.
        """
        return await self._get_populated(student_id)

    async def create_student(self, request: StudentCreateRequest) -> StudentResponse:
        """Create a new student in an existing class.

        Args:
            request: Student creation data.

        Returns:
            Created student.

        Raises:
            ClassNotFoundError: If class not found.
        """
        await self._verify_class(request.class_id)

        student = await self.students.create(request.model_dump())

        logger.info("Created student: %s %s (%s)", student.first_name, student.last_name, student.id)

        return await self._get_populated(student.id)

    async def update_student(
        self,
        student_id: str,
        request: StudentUpdateRequest,
    ) -> StudentResponse:
        """Update a student.

        Args:
            student_id: Student identifier.
            request: Fields to change.

        Returns:
            Updated student.

        Raises:
            StudentNotFoundError: If student not found.
            ClassNotFoundError: If new class not found.
        """
        changes = request.changes()

        student = await self.students.find_by_id(student_id)
        if student is None:
            raise StudentNotFoundError(f"Student {student_id} not found")

        if "class_id" in changes and changes["class_id"] != student.class_id:
            await self._verify_class(changes["class_id"])

        await self.students.find_by_id_and_update(student_id, changes)

        logger.info("Updated student: %s", student_id)

        return await self._get_populated(student_id)

    async def delete_student(self, student_id: str) -> None:
        """Delete a student. Grades referencing it are kept.

        Raises:
            StudentNotFoundError: If student not found.
        """
        student = await self.students.find_by_id_and_delete(student_id)
        if student is None:
            raise StudentNotFoundError(f"Student {student_id} not found")

        logger.info("Deleted student: %s", student_id)

    async def _verify_class(self, class_id: str) -> None:
        if await self.classes.find_by_id(class_id) is None:
            logger.debug("Student check failed: class %s not found", class_id)
            raise ClassNotFoundError(f"Class {class_id} not found")

    async def _get_populated(self, student_id: str) -> StudentResponse:
        students = await self.students.find(
            {"id": student_id},
            options=(selectinload(Student.class_),),
        )
        if not students:
            raise StudentNotFoundError(f"Student {student_id} not found")
        return StudentResponse.model_validate(students[0])
