# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Class service for managing classes.

This module provides the ClassService class for:
- Class CRUD operations
- Teacher assignment checks
- Class name uniqueness
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from scolaris.infrastructure.database.models import Class
from scolaris.infrastructure.database.repositories import (
    ClassRepository,
    TeacherRepository,
)
from scolaris.models.class_ import (
    ClassCreateRequest,
    ClassResponse,
    ClassUpdateRequest,
)

logger = logging.getLogger(__name__)


class ClassServiceError(Exception):
    """Base exception for class service errors."""

    pass


class ClassNotFoundError(ClassServiceError):
    """Raised when class is not found."""

    pass


class ClassNameExistsError(ClassServiceError):
    """Raised when class name is already taken."""

    pass


class TeacherNotFoundError(ClassServiceError):
    """Raised when the class's teacher is not found."""

    pass


class ClassService:
    """Service for managing classes.

    Attributes:
        db: Async database session.
    """

    def __init__(self, db: AsyncSession) -> None:
        """Initialize class service.

        Args:
            db: Async database session.
        """
        self.db = db
        self.classes = ClassRepository(db)
        self.teachers = TeacherRepository(db)

    async def list_classes(self) -> list[ClassResponse]:
        """List classes ordered by name, with their teacher."""
        classes = await self.classes.find(
            order_by=(Class.name,),
            options=(selectinload(Class.teacher),),
        )
        return [ClassResponse.model_validate(c) for c in classes]

    async def get_class(self, class_id: str) -> ClassResponse:
        """Get class by ID.

        Raises:
            ClassNotFoundError: If class not found.
        """
        return await self._get_populated(class_id)

    async def create_class(self, request: ClassCreateRequest) -> ClassResponse:
        """Create a new class.

        Args:
            request: Class creation data.

        Returns:
            Created class.

        Raises:
            TeacherNotFoundError: If teacher not found.
            ClassNameExistsError: If name is already used.
        """
        await self._verify_teacher(request.teacher_id)
        await self._verify_name_available(request.name)

        class_ = await self.classes.create(request.model_dump())

        logger.info("Created class: %s (%s)", class_.name, class_.id)

        return await self._get_populated(class_.id)

    async def update_class(self, class_id: str, request: ClassUpdateRequest) -> ClassResponse:
        """Update a class.

        The teacher is re-checked only when it changes, and the name only
        when it changes.

        Raises:
            ClassNotFoundError: If class not found.
            TeacherNotFoundError: If new teacher not found.
            ClassNameExistsError: If new name is already used.
        """
        changes = request.changes()

        class_ = await self.classes.find_by_id(class_id)
        if class_ is None:
            raise ClassNotFoundError(f"Class {class_id} not found")

        if "teacher_id" in changes and changes["teacher_id"] != class_.teacher_id:
            await self._verify_teacher(changes["teacher_id"])
        if "name" in changes and changes["name"] != class_.name:
            await self._verify_name_available(changes["name"])

        await self.classes.find_by_id_and_update(class_id, changes)

        logger.info("Updated class: %s", class_id)

        return await self._get_populated(class_id)

    async def delete_class(self, class_id: str) -> None:
        """Delete a class. Students and grades referencing it are kept.

        Raises:
            ClassNotFoundError: If class not found.
        """
        class_ = await self.classes.find_by_id_and_delete(class_id)
        if class_ is None:
            raise ClassNotFoundError(f"Class {class_id} not found")

        logger.info("Deleted class: %s", class_id)

    async def _verify_teacher(self, teacher_id: str) -> None:
        if await self.teachers.find_by_id(teacher_id) is None:
            logger.debug("Class check failed: teacher %s not found", teacher_id)
            raise TeacherNotFoundError(f"Teacher {teacher_id} not found")

    async def _verify_name_available(self, name: str) -> None:
        if await self.classes.find_one(name=name) is not None:
            raise ClassNameExistsError(f"Class with name '{name}' already exists")

    async def _get_populated(self, class_id: str) -> ClassResponse:
        classes = await self.classes.find(
            {"id": class_id},
            options=(selectinload(Class.teacher),),
        )
        if not classes:
            raise ClassNotFoundError(f"Class {class_id} not found")
        return ClassResponse.model_validate(classes[0])
