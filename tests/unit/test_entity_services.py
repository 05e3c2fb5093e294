# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for Subject, Teacher and Trimester services."""

from datetime import date, datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from pydantic import ValidationError

from scolaris.domains.subject.service import (
    SubjectNameExistsError,
    SubjectNotFoundError,
    SubjectService,
)
from scolaris.domains.teacher.service import ClassNotFoundError, TeacherNotFoundError, TeacherService
from scolaris.domains.trimester.service import TrimesterNotFoundError, TrimesterService
from scolaris.models.subject import SubjectCreateRequest, SubjectUpdateRequest
from scolaris.models.teacher import TeacherCreateRequest, TeacherUpdateRequest
from scolaris.models.trimester import TrimesterCreateRequest, TrimesterUpdateRequest

NOW = datetime(2025, 1, 10, tzinfo=timezone.utc)


@pytest.fixture
def subject_service():
    service = SubjectService(db=AsyncMock())
    service.subjects = AsyncMock()
    return service


@pytest.fixture
def teacher_service():
    service = TeacherService(db=AsyncMock())
    service.teachers = AsyncMock()
    service.classes = AsyncMock()
    return service


@pytest.fixture
def trimester_service():
    service = TrimesterService(db=AsyncMock())
    service.trimesters = AsyncMock()
    return service


@pytest.fixture
def math():
    return SimpleNamespace(id="math", name="Mathématiques", created_at=NOW, updated_at=NOW)


@pytest.fixture
def teacher_record():
    return SimpleNamespace(
        id="teacher-1",
        last_name="Dubois",
        first_name="Marie",
        birth_date=date(1985, 3, 15),
        address=None,
        gender="FEMALE",
        created_at=NOW,
        updated_at=NOW,
    )


class TestSubjectService:
    """Tests for SubjectService."""

    @pytest.mark.asyncio
    async def test_create_subject(self, subject_service, math):
        """Test creating a subject with a free name."""
        subject_service.subjects.find_one.return_value = None
        subject_service.subjects.create.return_value = math

        result = await subject_service.create_subject(SubjectCreateRequest(name="Mathématiques"))

        assert result.name == "Mathématiques"

    @pytest.mark.asyncio
    async def test_create_duplicate_subject(self, subject_service, math):
        """Test creating a subject with a taken name."""
        subject_service.subjects.find_one.return_value = math

        with pytest.raises(SubjectNameExistsError):
            await subject_service.create_subject(SubjectCreateRequest(name="Mathématiques"))

        subject_service.subjects.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rename_to_taken_name(self, subject_service, math):
        """Test renaming a subject to another subject's name."""
        subject_service.subjects.find_by_id.return_value = math
        subject_service.subjects.find_one.return_value = SimpleNamespace(id="fr", name="Français")

        with pytest.raises(SubjectNameExistsError):
            await subject_service.update_subject("math", SubjectUpdateRequest(name="Français"))

        subject_service.subjects.find_by_id_and_update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_missing_subject(self, subject_service):
        """Test updating a missing subject."""
        subject_service.subjects.find_by_id.return_value = None

        with pytest.raises(SubjectNotFoundError):
            await subject_service.update_subject("missing", SubjectUpdateRequest(name="Art"))

    def test_name_length_bound(self):
        """Test subject names are limited to 250 characters."""
        with pytest.raises(ValidationError):
            SubjectCreateRequest(name="x" * 251)


class TestTeacherService:
    """Tests for TeacherService."""

    @pytest.mark.asyncio
    async def test_create_teacher(self, teacher_service, teacher_record, sample_teacher_data):
        """Test creating a teacher."""
        teacher_service.teachers.create.return_value = teacher_record

        result = await teacher_service.create_teacher(TeacherCreateRequest(**sample_teacher_data))

        assert result.last_name == "Dubois"
        values = teacher_service.teachers.create.await_args.args[0]
        assert values["birth_date"] == date(1985, 3, 15)

    @pytest.mark.asyncio
    async def test_update_sends_only_provided_fields(self, teacher_service, teacher_record):
        """Test a partial update writes only the provided fields."""
        teacher_service.teachers.find_by_id_and_update.return_value = teacher_record

        await teacher_service.update_teacher("teacher-1", TeacherUpdateRequest(address="1 Rue Neuve"))

        teacher_service.teachers.find_by_id_and_update.assert_awaited_once_with(
            "teacher-1", {"address": "1 Rue Neuve"}
        )

    @pytest.mark.asyncio
    async def test_get_missing_teacher(self, teacher_service):
        """Test getting a missing teacher."""
        teacher_service.teachers.find_by_id.return_value = None

        with pytest.raises(TeacherNotFoundError):
            await teacher_service.get_teacher("missing")

    @pytest.mark.asyncio
    async def test_delete_missing_teacher(self, teacher_service):
        """Test deleting a missing teacher."""
        teacher_service.teachers.find_by_id_and_delete.return_value = None

        with pytest.raises(TeacherNotFoundError):
            await teacher_service.delete_teacher("missing")

    @pytest.mark.asyncio
    async def test_list_by_class_returns_its_teacher(self, teacher_service, teacher_record):
        """Test filtering by class returns only the class teacher."""
        teacher_service.classes.find_by_id.return_value = SimpleNamespace(id="class-1", teacher_id="teacher-1")
        teacher_service.teachers.find_by_id.return_value = teacher_record

        result = await teacher_service.list_teachers(class_id="class-1")

        assert [t.id for t in result] == ["teacher-1"]
        teacher_service.teachers.find_by_id.assert_awaited_once_with("teacher-1")
        teacher_service.teachers.find.assert_not_called()

    @pytest.mark.asyncio
    async def test_list_by_unknown_class(self, teacher_service):
        """Test filtering by a missing class raises."""
        teacher_service.classes.find_by_id.return_value = None

        with pytest.raises(ClassNotFoundError):
            await teacher_service.list_teachers(class_id="missing")

    @pytest.mark.asyncio
    async def test_list_by_class_with_deleted_teacher(self, teacher_service):
        """Test a class whose teacher was deleted gives an empty list."""
        teacher_service.classes.find_by_id.return_value = SimpleNamespace(id="class-1", teacher_id="gone")
        teacher_service.teachers.find_by_id.return_value = None

        assert await teacher_service.list_teachers(class_id="class-1") == []

    def test_last_name_cannot_be_cleared(self):
        """Test an explicit null last name is rejected."""
        with pytest.raises(ValidationError):
            TeacherUpdateRequest.model_validate({"last_name": None})

    def test_address_can_be_cleared(self):
        """Test an explicit null address is kept as a change."""
        request = TeacherUpdateRequest.model_validate({"address": None})

        assert request.changes() == {"address": None}


class TestTrimesterService:
    """Tests for TrimesterService."""

    @pytest.mark.asyncio
    async def test_create_trimester(self, trimester_service):
        """Test creating a trimester."""
        record = SimpleNamespace(id="t1", name="T1", date=date(2024, 9, 2), created_at=NOW, updated_at=NOW)
        trimester_service.trimesters.create.return_value = record

        result = await trimester_service.create_trimester(
            TrimesterCreateRequest(name="T1", date=date(2024, 9, 2))
        )

        assert result.name == "T1"
        assert result.date == date(2024, 9, 2)

    @pytest.mark.asyncio
    async def test_update_missing_trimester(self, trimester_service):
        """Test updating a missing trimester."""
        trimester_service.trimesters.find_by_id_and_update.return_value = None

        with pytest.raises(TrimesterNotFoundError):
            await trimester_service.update_trimester("missing", TrimesterUpdateRequest(name="T2"))

    def test_name_length_bound(self):
        """Test trimester names are limited to 10 characters."""
        with pytest.raises(ValidationError):
            TrimesterCreateRequest(name="Trimester 1", date=date(2024, 9, 2))
