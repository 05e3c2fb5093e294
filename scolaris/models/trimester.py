# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Trimester request and response models."""

import datetime as dt

from pydantic import BaseModel, Field

from scolaris.models.common import ORMModel, PartialUpdateRequest


class TrimesterCreateRequest(BaseModel):
    """Request to create a trimester. date marks the period."""

    name: str = Field(min_length=1, max_length=10)
    date: dt.date


class TrimesterUpdateRequest(PartialUpdateRequest):
    non_nullable = ("name", "date")

    name: str | None = Field(default=None, min_length=1, max_length=10)
    date: dt.date | None = None


class TrimesterSummary(ORMModel):
    id: str
    name: str


class TrimesterResponse(ORMModel):
    id: str
    name: str
    date: dt.date
    created_at: dt.datetime
    updated_at: dt.datetime


class TrimesterListResponse(BaseModel):
    count: int
    items: list[TrimesterResponse]
