# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Subject service for managing taught subjects."""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from scolaris.infrastructure.database.models import Subject
from scolaris.infrastructure.database.repositories import SubjectRepository
from scolaris.models.subject import (
    SubjectCreateRequest,
    SubjectResponse,
    SubjectUpdateRequest,
)

logger = logging.getLogger(__name__)


class SubjectServiceError(Exception):
    """Base exception for subject service errors."""

    pass


class SubjectNotFoundError(SubjectServiceError):
    """Raised when subject is not found."""

    pass


class SubjectNameExistsError(SubjectServiceError):
    """Raised when subject name is already taken."""

    pass


class SubjectService:
    """Service for managing subjects."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.subjects = SubjectRepository(db)

    async def list_subjects(self) -> list[SubjectResponse]:
        subjects = await self.subjects.find(order_by=(Subject.name,))
        return [SubjectResponse.model_validate(s) for s in subjects]

    async def get_subject(self, subject_id: str) -> SubjectResponse:
        """Get subject by ID.

        Raises:
            SubjectNotFoundError: If subject not found.
        """
        subject = await self.subjects.find_by_id(subject_id)
        if subject is None:
            raise SubjectNotFoundError(f"Subject {subject_id} not found")
        return SubjectResponse.model_validate(subject)

    async def create_subject(self, request: SubjectCreateRequest) -> SubjectResponse:
        """Create a new subject.

        Raises:
            SubjectNameExistsError: If name is already used.
        """
        await self._verify_name_available(request.name)

        subject = await self.subjects.create(request.model_dump())

        logger.info("Created subject: %s (%s)", subject.name, subject.id)

        return SubjectResponse.model_validate(subject)

    async def update_subject(
        self,
        subject_id: str,
        request: SubjectUpdateRequest,
    ) -> SubjectResponse:
        """Update a subject.

        Raises:
            SubjectNotFoundError: If subject not found.
            SubjectNameExistsError: If new name is already used.
        """
        changes = request.changes()

        subject = await self.subjects.find_by_id(subject_id)
        if subject is None:
            raise SubjectNotFoundError(f"Subject {subject_id} not found")

        if "name" in changes and changes["name"] != subject.name:
            await self._verify_name_available(changes["name"])

        subject = await self.subjects.find_by_id_and_update(subject_id, changes)

        logger.info("Updated subject: %s", subject_id)

        return SubjectResponse.model_validate(subject)

    async def delete_subject(self, subject_id: str) -> None:
        """Delete a subject. Grades referencing it are kept.

        Raises:
            SubjectNotFoundError: If subject not found.
        """
        subject = await self.subjects.find_by_id_and_delete(subject_id)
        if subject is None:
            raise SubjectNotFoundError(f"Subject {subject_id} not found")

        logger.info("Deleted subject: %s", subject_id)

    async def _verify_name_available(self, name: str) -> None:
        if await self.subjects.find_one(name=name) is not None:
            raise SubjectNameExistsError(f"Subject with name '{name}' already exists")
