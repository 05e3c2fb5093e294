# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Trimester service for managing grading periods."""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from scolaris.infrastructure.database.models import Trimester
from scolaris.infrastructure.database.repositories import TrimesterRepository
from scolaris.models.trimester import (
    TrimesterCreateRequest,
    TrimesterResponse,
    TrimesterUpdateRequest,
)

logger = logging.getLogger(__name__)


class TrimesterServiceError(Exception):
    """Base exception for trimester service errors."""

    pass


class TrimesterNotFoundError(TrimesterServiceError):
    """Raised when trimester is not found."""

    pass


class TrimesterService:
    """Service for managing trimesters."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.trimesters = TrimesterRepository(db)

    async def list_trimesters(self) -> list[TrimesterResponse]:
        """List trimesters in chronological order."""
        trimesters = await self.trimesters.find(order_by=(Trimester.date, Trimester.name))
        return [TrimesterResponse.model_validate(t) for t in trimesters]

    async def get_trimester(self, trimester_id: str) -> TrimesterResponse:
        """Get trimester by ID.

        Raises:
            TrimesterNotFoundError: If trimester not found.
        """
        trimester = await self.trimesters.find_by_id(trimester_id)
        if trimester is None:
            raise TrimesterNotFoundError(f"Trimester {trimester_id} not found")
        return TrimesterResponse.model_validate(trimester)

    async def create_trimester(self, request: TrimesterCreateRequest) -> TrimesterResponse:
        trimester = await self.trimesters.create(request.model_dump())

        logger.info("Created trimester: %s (%s)", trimester.name, trimester.id)

        return TrimesterResponse.model_validate(trimester)

    async def update_trimester(
        self,
        trimester_id: str,
        request: TrimesterUpdateRequest,
    ) -> TrimesterResponse:
        """Update a trimester.

        Raises:
            TrimesterNotFoundError: If trimester not found.
        """
        trimester = await self.trimesters.find_by_id_and_update(trimester_id, request.changes())
        if trimester is None:
            raise TrimesterNotFoundError(f"Trimester {trimester_id} not found")

        logger.info("Updated trimester: %s", trimester_id)

        return TrimesterResponse.model_validate(trimester)

    async def delete_trimester(self, trimester_id: str) -> None:
        """Delete a trimester. Grades referencing it are kept.

        Raises:
            TrimesterNotFoundError: If trimester not found.
        """
        trimester = await self.trimesters.find_by_id_and_delete(trimester_id)
        if trimester is None:
            raise TrimesterNotFoundError(f"Trimester {trimester_id} not found")

        logger.info("Deleted trimester: %s", trimester_id)
