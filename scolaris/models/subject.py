# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Subject request and response models."""

from datetime import datetime

from pydantic import BaseModel, Field

from scolaris.models.common import ORMModel, PartialUpdateRequest


class SubjectCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=250)


class SubjectUpdateRequest(PartialUpdateRequest):
    non_nullable = ("name",)

    name: str | None = Field(default=None, min_length=1, max_length=250)


class SubjectSummary(ORMModel):
    id: str
    name: str


class SubjectResponse(ORMModel):
    id: str
    name: str
    created_at: datetime
    updated_at: datetime


class SubjectListResponse(BaseModel):
    count: int
    items: list[SubjectResponse]
