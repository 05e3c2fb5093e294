# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Subject API endpoints.

- GET / - List subjects
- GET /{subject_id} - Get subject
- POST / - Create a subject (admin)
- PUT /{subject_id} - Update a subject (admin)
- DELETE /{subject_id} - Delete a subject (admin)
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from scolaris.api.dependencies import get_db, require_admin, require_auth
from scolaris.api.middleware.auth import CurrentUser
from scolaris.domains.subject.service import (
    SubjectNameExistsError,
    SubjectNotFoundError,
    SubjectService,
)
from scolaris.models.auth import MessageResponse
from scolaris.models.subject import (
    SubjectCreateRequest,
    SubjectListResponse,
    SubjectResponse,
    SubjectUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(db: AsyncSession) -> SubjectService:
    return SubjectService(db=db)


@router.get("", response_model=SubjectListResponse, summary="List subjects")
async def list_subjects(
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_auth),
) -> SubjectListResponse:
    subjects = await _get_service(db).list_subjects()
    return SubjectListResponse(count=len(subjects), items=subjects)


@router.get("/{subject_id}", response_model=SubjectResponse, summary="Get subject")
async def get_subject(
    subject_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_auth),
) -> SubjectResponse:
    try:
        return await _get_service(db).get_subject(subject_id)
    except SubjectNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post(
    "",
    response_model=SubjectResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create subject",
)
async def create_subject(
    request: SubjectCreateRequest,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
) -> SubjectResponse:
    try:
        return await _get_service(db).create_subject(request)
    except SubjectNameExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.put("/{subject_id}", response_model=SubjectResponse, summary="Update subject")
async def update_subject(
    subject_id: str,
    request: SubjectUpdateRequest,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
) -> SubjectResponse:
    try:
        return await _get_service(db).update_subject(subject_id, request)
    except SubjectNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except SubjectNameExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.delete("/{subject_id}", response_model=MessageResponse, summary="Delete subject")
async def delete_subject(
    subject_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
) -> MessageResponse:
    try:
        await _get_service(db).delete_subject(subject_id)
    except SubjectNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MessageResponse(message="Subject deleted")
