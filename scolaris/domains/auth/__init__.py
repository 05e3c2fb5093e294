# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Authentication domain package.

This package provides:
- JWT access token creation and validation
- bcrypt password hashing
- User registration, login and role management
"""

from scolaris.domains.auth.jwt import (
    InvalidTokenError,
    JWTError,
    JWTManager,
    TokenExpiredError,
    TokenPayload,
)
from scolaris.domains.auth.password import PasswordHasher
from scolaris.domains.auth.service import (
    AuthenticationError,
    AuthService,
    InvalidCredentialsError,
    UserExistsError,
    UserNotFoundError,
)

__all__ = [
    "AuthService",
    "AuthenticationError",
    "InvalidCredentialsError",
    "UserExistsError",
    "UserNotFoundError",
    "JWTManager",
    "JWTError",
    "TokenExpiredError",
    "InvalidTokenError",
    "TokenPayload",
    "PasswordHasher",
]
