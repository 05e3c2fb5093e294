# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Teacher API endpoints.

This module provides endpoints for teacher management:
- GET / - List teachers (optionally the teacher of one class)
- GET /{teacher_id} - Get teacher details
- GET /{teacher_id}/students-grades - The teacher's grades by student
- POST / - Create a teacher (admin)
- PUT /{teacher_id} - Update a teacher (admin)
- DELETE /{teacher_id} - Delete a teacher (admin)
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from scolaris.api.dependencies import get_db, require_admin, require_auth
from scolaris.api.middleware.auth import CurrentUser
from scolaris.api.v1.grades import get_teacher_student_grades
from scolaris.domains.teacher.service import (
    ClassNotFoundError,
    TeacherNotFoundError,
    TeacherService,
)
from scolaris.models.auth import MessageResponse
from scolaris.models.grade import TeacherStudentGradesResponse
from scolaris.models.teacher import (
    TeacherCreateRequest,
    TeacherListResponse,
    TeacherResponse,
    TeacherUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(db: AsyncSession) -> TeacherService:
    return TeacherService(db=db)


@router.get("", response_model=TeacherListResponse, summary="List teachers")
async def list_teachers(
    class_id: str | None = Query(None, description="Only the teacher of this class"),
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_auth),
) -> TeacherListResponse:
    try:
        teachers = await _get_service(db).list_teachers(class_id=class_id)
    except ClassNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return TeacherListResponse(count=len(teachers), items=teachers)


@router.get("/{teacher_id}", response_model=TeacherResponse, summary="Get teacher")
async def get_teacher(
    teacher_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_auth),
) -> TeacherResponse:
    try:
        return await _get_service(db).get_teacher(teacher_id)
    except TeacherNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get(
    "/{teacher_id}/students-grades",
    response_model=TeacherStudentGradesResponse,
    summary="List the teacher's grades by student",
)
async def list_students_grades(
    teacher_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_auth),
) -> TeacherStudentGradesResponse:
    return await get_teacher_student_grades(teacher_id, db)


@router.post(
    "",
    response_model=TeacherResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create teacher",
)
async def create_teacher(
    request: TeacherCreateRequest,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
) -> TeacherResponse:
    return await _get_service(db).create_teacher(request)


@router.put("/{teacher_id}", response_model=TeacherResponse, summary="Update teacher")
async def update_teacher(
    teacher_id: str,
    request: TeacherUpdateRequest,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
) -> TeacherResponse:
    try:
        return await _get_service(db).update_teacher(teacher_id, request)
    except TeacherNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{teacher_id}", response_model=MessageResponse, summary="Delete teacher")
async def delete_teacher(
    teacher_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
) -> MessageResponse:
    try:
        await _get_service(db).delete_teacher(teacher_id)
    except TeacherNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MessageResponse(message="Teacher deleted")
