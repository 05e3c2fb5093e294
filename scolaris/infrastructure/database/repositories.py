# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Entity repositories over the record store.

Each repository is a thin accessor bound to one model and one session.
Services compose repositories; repositories never validate references
between records.

Example:
    >>> students = StudentRepository(db)
    >>> student = await students.find_by_id(student_id)
    >>> if student is None:
    ...     raise ReferenceNotFoundError("student", student_id)
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.orm.interfaces import ORMOption

from scolaris.infrastructure.database.models import (
    Base,
    Class,
    Grade,
    Student,
    Subject,
    Teacher,
    Trimester,
    User,
)

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """Generic find/create/update/delete accessor for one model.

    Attributes:
        model: Model class handled by this repository.
        db: Async database session.
    """

    model: type[ModelT]

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def find_by_id(self, entity_id: str) -> ModelT | None:
        """Get a record by identifier.

        Args:
            entity_id: Record identifier.

        Returns:
            The record, or None if absent.
        """
        return await self.db.get(self.model, entity_id)

    async def find(
        self,
        filters: Mapping[str, Any] | None = None,
        order_by: Sequence[Any] = (),
        options: Sequence[ORMOption] = (),
    ) -> list[ModelT]:
        """Find records matching equality filters.

        Filters combine with AND. Keys whose value is None are ignored.

        Args:
            filters: Column name to required value.
            order_by: Ordering clauses.
            options: Loader options (eager loading).

        Returns:
            Matching records.
        """
        query = select(self.model)
        for column, value in (filters or {}).items():
            if value is not None:
                query = query.where(getattr(self.model, column) == value)
        if order_by:
            query = query.order_by(*order_by)
        if options:
            query = query.options(*options).execution_options(populate_existing=True)

        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def find_one(self, **filters: Any) -> ModelT | None:
        """Find the first record matching equality filters."""
        query = select(self.model).filter_by(**filters).limit(1)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def create(self, values: Mapping[str, Any]) -> ModelT:
        """Insert a new record.

        Args:
            values: Column values.

        Returns:
            The persisted record.
        """
        record = self.model(**values)
        self.db.add(record)
        await self.db.commit()
        await self.db.refresh(record)
        return record

    async def find_by_id_and_update(
        self,
        entity_id: str,
        values: Mapping[str, Any],
    ) -> ModelT | None:
        """Apply a partial set of column values to a record.

        Args:
            entity_id: Record identifier.
            values: Only the columns to change.

        Returns:
            The post-update record, or None if absent.
        """
        record = await self.find_by_id(entity_id)
        if record is None:
            return None

        for column, value in values.items():
            setattr(record, column, value)

        await self.db.commit()
        await self.db.refresh(record)
        return record

    async def find_by_id_and_delete(self, entity_id: str) -> ModelT | None:
        """Delete a record by identifier.

        Returns:
            The deleted record, or None if absent.
        """
        record = await self.find_by_id(entity_id)
        if record is None:
            return None

        await self.db.delete(record)
        await self.db.commit()
        return record


class TeacherRepository(Repository[Teacher]):
    model = Teacher


class ClassRepository(Repository[Class]):
    model = Class


class StudentRepository(Repository[Student]):
    model = Student


class SubjectRepository(Repository[Subject]):
    model = Subject


class TrimesterRepository(Repository[Trimester]):
    model = Trimester


class UserRepository(Repository[User]):
    model = User


class GradeRepository(Repository[Grade]):
    """Grade accessor with reference population."""

    model = Grade

    @staticmethod
    def populate_options() -> tuple[ORMOption, ...]:
        """Loader options resolving the five grade references.

        The student's class is loaded too, for views that show it.
        A reference to a deleted record loads as None.
        """
        return (
            selectinload(Grade.student).selectinload(Student.class_),
            selectinload(Grade.class_),
            selectinload(Grade.subject),
            selectinload(Grade.teacher),
            selectinload(Grade.trimester),
        )

    async def find_populated(
        self,
        filters: Mapping[str, Any] | None = None,
    ) -> list[Grade]:
        """Find grades, most recently created first, with references loaded."""
        return await self.find(
            filters,
            order_by=(Grade.created_at.desc(), Grade.id.desc()),
            options=self.populate_options(),
        )

    async def find_by_id_populated(self, grade_id: str) -> Grade | None:
        """Get one grade with references loaded."""
        query = (
            select(Grade)
            .where(Grade.id == grade_id)
            .options(*self.populate_options())
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        return result.scalar_one_or_none()
