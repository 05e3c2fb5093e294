# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Grade API endpoints.

This module provides endpoints for grades:
- GET / - List grades (flat, or grouped with group_by=subject)
- GET /teachers/{teacher_id}/students-grades - A teacher's grades by student
- GET /{grade_id} - Get grade details
- POST / - Record a grade (admin or teacher)
- PUT|PATCH /{grade_id} - Partially update a grade (admin or teacher)
- DELETE /{grade_id} - Delete a grade (admin)

Reads require an authenticated user.
"""

import logging
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from scolaris.api.dependencies import get_db, require_admin, require_auth, require_teacher_or_admin
from scolaris.api.middleware.auth import CurrentUser
from scolaris.domains.grade.service import (
    EntityNotFoundError,
    GradeService,
    StudentNotInClassError,
)
from scolaris.models.auth import MessageResponse
from scolaris.models.grade import (
    GradeCreateRequest,
    GradeFilters,
    GradeListResponse,
    GradeResponse,
    GradeUpdateRequest,
    SubjectGroupedGradesResponse,
    TeacherStudentGradesResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(db: AsyncSession) -> GradeService:
    """Get grade service instance.

    Args:
        db: Database session.

    Returns:
        Configured GradeService instance.
    """
    return GradeService(db=db)


def not_found_exception(error: EntityNotFoundError) -> HTTPException:
    """Build a 404 naming the missing entity and identifier."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={
            "code": "not_found",
            "entity": error.entity,
            "id": error.entity_id,
            "message": str(error),
        },
    )


def student_not_in_class_exception(error: StudentNotInClassError) -> HTTPException:
    """Build a 400 for a student/class mismatch."""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={
            "code": "student_not_in_class",
            "student_id": error.student_id,
            "class_id": error.class_id,
            "message": str(error),
        },
    )


async def get_teacher_student_grades(
    teacher_id: str,
    db: AsyncSession,
) -> TeacherStudentGradesResponse:
    """Shared handler for both teacher students-grades routes."""
    service = _get_service(db)
    try:
        groups = await service.list_student_grades_for_teacher(teacher_id)
    except EntityNotFoundError as e:
        raise not_found_exception(e)
    return TeacherStudentGradesResponse(count=len(groups), items=groups)


@router.get(
    "",
    response_model=SubjectGroupedGradesResponse | GradeListResponse,
    summary="List grades",
)
async def list_grades(
    student_id: str | None = Query(None),
    class_id: str | None = Query(None),
    subject_id: str | None = Query(None),
    trimester_id: str | None = Query(None),
    teacher_id: str | None = Query(None),
    group_by: Literal["subject"] | None = Query(None, description="Group results by subject"),
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_auth),
) -> GradeListResponse | SubjectGroupedGradesResponse:
    """List grades, newest first.

    With group_by=subject only the class and trimester filters apply.
    """
    service = _get_service(db)

    if group_by == "subject":
        groups = await service.list_grades_grouped_by_subject(
            class_id=class_id,
            trimester_id=trimester_id,
        )
        return SubjectGroupedGradesResponse(
            count=len(groups),
            total_grades=sum(len(group.grades) for group in groups),
            items=groups,
        )

    grades = await service.list_grades(
        GradeFilters(
            student_id=student_id,
            class_id=class_id,
            subject_id=subject_id,
            trimester_id=trimester_id,
            teacher_id=teacher_id,
        )
    )
    return GradeListResponse(count=len(grades), items=grades)


@router.get(
    "/teachers/{teacher_id}/students-grades",
    response_model=TeacherStudentGradesResponse,
    summary="List a teacher's grades by student",
)
async def list_teacher_students_grades(
    teacher_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_auth),
) -> TeacherStudentGradesResponse:
    return await get_teacher_student_grades(teacher_id, db)


@router.get("/{grade_id}", response_model=GradeResponse, summary="Get grade")
async def get_grade(
    grade_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_auth),
) -> GradeResponse:
    service = _get_service(db)
    try:
        return await service.get_grade(grade_id)
    except EntityNotFoundError as e:
        raise not_found_exception(e)


@router.post(
    "",
    response_model=GradeResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record a grade",
)
async def create_grade(
    request: GradeCreateRequest,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_teacher_or_admin),
) -> GradeResponse:
    """Record a grade after checking its references."""
    service = _get_service(db)
    try:
        return await service.create_grade(request)
    except EntityNotFoundError as e:
        raise not_found_exception(e)
    except StudentNotInClassError as e:
        raise student_not_in_class_exception(e)


@router.put("/{grade_id}", response_model=GradeResponse, summary="Update a grade")
@router.patch("/{grade_id}", response_model=GradeResponse, summary="Update a grade")
async def update_grade(
    grade_id: str,
    request: GradeUpdateRequest,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_teacher_or_admin),
) -> GradeResponse:
    """Update only the provided grade fields."""
    service = _get_service(db)
    try:
        return await service.update_grade(grade_id, request)
    except EntityNotFoundError as e:
        raise not_found_exception(e)
    except StudentNotInClassError as e:
        raise student_not_in_class_exception(e)


@router.delete("/{grade_id}", response_model=MessageResponse, summary="Delete a grade")
async def delete_grade(
    grade_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
) -> MessageResponse:
    service = _get_service(db)
    try:
        await service.delete_grade(grade_id)
    except EntityNotFoundError as e:
        raise not_found_exception(e)
    return MessageResponse(message="Grade deleted")
