# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student API endpoints.

This module provides endpoints for student management:
- GET / - List students (optionally by class)
- GET /{student_id} - Get student details
- POST / - Create a student (admin)
- PUT /{student_id} - Update a student (admin)
- DELETE /{student_id} - Delete a student (admin)
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from scolaris.api.dependencies import get_db, require_admin, require_auth
from scolaris.api.middleware.auth import CurrentUser
from scolaris.domains.student.service import (
    ClassNotFoundError,
    StudentNotFoundError,
    StudentService,
)
from scolaris.models.auth import MessageResponse
from scolaris.models.student import (
    StudentCreateRequest,
    StudentListResponse,
    StudentResponse,
    StudentUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(db: AsyncSession) -> StudentService:
    return StudentService(db=db)


@router.get("", response_model=StudentListResponse, summary="List students")
async def list_students(
    class_id: str | None = Query(None, description="Only students in this class"),
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_auth),
) -> StudentListResponse:
    students = await _get_service(db).list_students(class_id=class_id)
    return StudentListResponse(count=len(students), items=students)


@router.get("/{student_id}", response_model=StudentResponse, summary="Get student")
async def get_student(
    student_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_auth),
) -> StudentResponse:
    try:
        return await _get_service(db).get_student(student_id)
    except StudentNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post(
    "",
    response_model=StudentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create student",
)
async def create_student(
    request: StudentCreateRequest,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
) -> StudentResponse:
    try:
        return await _get_service(db).create_student(request)
    except ClassNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put("/{student_id}", response_model=StudentResponse, summary="Update student")
async def update_student(
    student_id: str,
    request: StudentUpdateRequest,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
) -> StudentResponse:
    try:
        return await _get_service(db).update_student(student_id, request)
    except (StudentNotFoundError, ClassNotFoundError) as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{student_id}", response_model=MessageResponse, summary="Delete student")
async def delete_student(
    student_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
) -> MessageResponse:
    try:
        await _get_service(db).delete_student(student_id)
    except StudentNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MessageResponse(message="Student deleted")
