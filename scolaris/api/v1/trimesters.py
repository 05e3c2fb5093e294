# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Trimester API endpoints.

- GET / - List trimesters in date order
- GET /{trimester_id} - Get trimester
- POST / - Create a trimester (admin)
- PUT /{trimester_id} - Update a trimester (admin)
- DELETE /{trimester_id} - Delete a trimester (admin)
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from scolaris.api.dependencies import get_db, require_admin, require_auth
from scolaris.api.middleware.auth import CurrentUser
from scolaris.domains.trimester.service import TrimesterNotFoundError, TrimesterService
from scolaris.models.auth import MessageResponse
from scolaris.models.trimester import (
    TrimesterCreateRequest,
    TrimesterListResponse,
    TrimesterResponse,
    TrimesterUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(db: AsyncSession) -> TrimesterService:
    return TrimesterService(db=db)


@router.get("", response_model=TrimesterListResponse, summary="List trimesters")
async def list_trimesters(
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_auth),
) -> TrimesterListResponse:
    trimesters = await _get_service(db).list_trimesters()
    return TrimesterListResponse(count=len(trimesters), items=trimesters)


@router.get("/{trimester_id}", response_model=TrimesterResponse, summary="Get trimester")
async def get_trimester(
    trimester_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_auth),
) -> TrimesterResponse:
    try:
        return await _get_service(db).get_trimester(trimester_id)
    except TrimesterNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post(
    "",
    response_model=TrimesterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create trimester",
)
async def create_trimester(
    request: TrimesterCreateRequest,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
) -> TrimesterResponse:
    return await _get_service(db).create_trimester(request)


@router.put("/{trimester_id}", response_model=TrimesterResponse, summary="Update trimester")
async def update_trimester(
    trimester_id: str,
    request: TrimesterUpdateRequest,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
) -> TrimesterResponse:
    try:
        return await _get_service(db).update_trimester(trimester_id, request)
    except TrimesterNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{trimester_id}", response_model=MessageResponse, summary="Delete trimester")
async def delete_trimester(
    trimester_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
) -> MessageResponse:
    try:
        await _get_service(db).delete_trimester(trimester_id)
    except TrimesterNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MessageResponse(message="Trimester deleted")
