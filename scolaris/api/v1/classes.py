# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Class management API endpoints.

This module provides endpoints for class management:
- GET / - List classes
- GET /{class_id} - Get class details
- POST / - Create a class (admin)
- PUT /{class_id} - Update a class (admin)
- DELETE /{class_id} - Delete a class (admin)
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from scolaris.api.dependencies import get_db, require_admin, require_auth
from scolaris.api.middleware.auth import CurrentUser
from scolaris.domains.class_.service import (
    ClassNameExistsError,
    ClassNotFoundError,
    ClassService,
    TeacherNotFoundError,
)
from scolaris.models.auth import MessageResponse
from scolaris.models.class_ import (
    ClassCreateRequest,
    ClassListResponse,
    ClassResponse,
    ClassUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(db: AsyncSession) -> ClassService:
    """Get class service instance.

    Args:
        db: Database session.

    Returns:
        Configured ClassService instance.
    """
    return ClassService(db=db)


@router.get("", response_model=ClassListResponse, summary="List classes")
async def list_classes(
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_auth),
) -> ClassListResponse:
    classes = await _get_service(db).list_classes()
    return ClassListResponse(count=len(classes), items=classes)


@router.get("/{class_id}", response_model=ClassResponse, summary="Get class")
async def get_class(
    class_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_auth),
) -> ClassResponse:
    try:
        return await _get_service(db).get_class(class_id)
    except ClassNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post(
    "",
    response_model=ClassResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create class",
)
async def create_class(
    request: ClassCreateRequest,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
) -> ClassResponse:
    """Create a class assigned to an existing teacher."""
    try:
        return await _get_service(db).create_class(request)
    except TeacherNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ClassNameExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.put("/{class_id}", response_model=ClassResponse, summary="Update class")
async def update_class(
    class_id: str,
    request: ClassUpdateRequest,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
) -> ClassResponse:
    try:
        return await _get_service(db).update_class(class_id, request)
    except (ClassNotFoundError, TeacherNotFoundError) as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ClassNameExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.delete("/{class_id}", response_model=MessageResponse, summary="Delete class")
async def delete_class(
    class_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
) -> MessageResponse:
    try:
        await _get_service(db).delete_class(class_id)
    except ClassNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MessageResponse(message="Class deleted")
