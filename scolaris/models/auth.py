# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Authentication request and response models."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, EmailStr, Field

from scolaris.models.common import ORMModel

UserRole = Literal["admin", "teacher", "student"]


class RegisterRequest(BaseModel):
    """Self-service registration. New accounts get the student role."""

    username: str = Field(min_length=3, max_length=30)
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class RoleUpdateRequest(BaseModel):
    role: UserRole


class UserResponse(ORMModel):
    """User account without credentials."""

    id: str
    username: str
    email: str
    role: UserRole
    created_at: datetime


class UserListResponse(BaseModel):
    count: int
    items: list[UserResponse]


class TokenResponse(BaseModel):
    """Issued access token and the authenticated user."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserResponse


class MessageResponse(BaseModel):
    message: str
