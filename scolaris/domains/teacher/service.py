# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Teacher service for managing teacher records.

Deleting a teacher does not touch classes or grades that reference it;
those keep the identifier and read back with an empty teacher summary.
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from scolaris.infrastructure.database.models import Teacher
from scolaris.infrastructure.database.repositories import ClassRepository, TeacherRepository
from scolaris.models.teacher import (
    TeacherCreateRequest,
    TeacherResponse,
    TeacherUpdateRequest,
)

logger = logging.getLogger(__name__)


class TeacherServiceError(Exception):
    """Base exception for teacher service errors."""

    pass


class TeacherNotFoundError(TeacherServiceError):
    """Raised when teacher is not found."""

    pass


class ClassNotFoundError(TeacherServiceError):
    """Raised when the class used as a filter is not found."""

    pass


class TeacherService:
    """Service for managing teachers.

    Attributes:
        db: Async database session.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.teachers = TeacherRepository(db)
        self.classes = ClassRepository(db)

    async def list_teachers(self, class_id: str | None = None) -> list[TeacherResponse]:
        """List teachers ordered by last name, then first name.

        Args:
            class_id: Only the teacher assigned to this class. A class whose
                teacher was deleted gives an empty list.

        Raises:
            ClassNotFoundError: If class_id is given and the class is not found.
        """
        if class_id is not None:
            class_ = await self.classes.find_by_id(class_id)
            if class_ is None:
                raise ClassNotFoundError(f"Class {class_id} not found")
            teacher = await self.teachers.find_by_id(class_.teacher_id)
            return [TeacherResponse.model_validate(teacher)] if teacher is not None else []

        teachers = await self.teachers.find(
            order_by=(Teacher.last_name, Teacher.first_name),
        )
        return [TeacherResponse.model_validate(t) for t in teachers]

    async def get_teacher(self, teacher_id: str) -> TeacherResponse:
        """Get teacher by ID.

        Raises:
            TeacherNotFoundError: If teacher not found.
        """
        teacher = await self._get_by_id(teacher_id)
        return TeacherResponse.model_validate(teacher)

    async def create_teacher(self, request: TeacherCreateRequest) -> TeacherResponse:
        """Create a new teacher.

        Args:
            request: Teacher creation data.

        Returns:
            Created teacher.
        """
        teacher = await self.teachers.create(request.model_dump())

        logger.info("Created teacher: %s %s (%s)", teacher.first_name, teacher.last_name, teacher.id)

        return TeacherResponse.model_validate(teacher)

    async def update_teacher(
        self,
        teacher_id: str,
        request: TeacherUpdateRequest,
    ) -> TeacherResponse:
        """Update a teacher.

        Args:
            teacher_id: Teacher identifier.
            request: Fields to change.

        Returns:
            Updated teacher.

        Raises:
            TeacherNotFoundError: If teacher not found.
        """
        teacher = await self.teachers.find_by_id_and_update(teacher_id, request.changes())
        if teacher is None:
            raise TeacherNotFoundError(f"Teacher {teacher_id} not found")

        logger.info("Updated teacher: %s", teacher_id)

        return TeacherResponse.model_validate(teacher)

    async def delete_teacher(self, teacher_id: str) -> None:
        """Delete a teacher.

        Raises:
            TeacherNotFoundError: If teacher not found.
        """
        teacher = await self.teachers.find_by_id_and_delete(teacher_id)
        if teacher is None:
            raise TeacherNotFoundError(f"Teacher {teacher_id} not found")

        logger.info("Deleted teacher: %s", teacher_id)

    async def _get_by_id(self, teacher_id: str) -> Teacher:
        """Get teacher by ID.

        Raises:
            TeacherNotFoundError: If not found.
        """
        teacher = await self.teachers.find_by_id(teacher_id)
        if teacher is None:
            raise TeacherNotFoundError(f"Teacher {teacher_id} not found")
        return teacher
