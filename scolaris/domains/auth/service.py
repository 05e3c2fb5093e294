# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Authentication service.

This module provides the AuthService class for:
- User registration with bcrypt password hashing
- Login returning a JWT access token
- Admin-side user listing and role changes
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from scolaris.domains.auth.jwt import JWTManager
from scolaris.domains.auth.password import PasswordHasher
from scolaris.infrastructure.database.models import User
from scolaris.infrastructure.database.repositories import UserRepository
from scolaris.models.auth import TokenResponse, UserResponse

logger = logging.getLogger(__name__)


class AuthenticationError(Exception):
    """Base exception for authentication errors."""

    pass


class InvalidCredentialsError(AuthenticationError):
    """Raised when email or password is wrong.

    The same message is used for both so a caller cannot probe which
    emails are registered.
    """

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class UserExistsError(AuthenticationError):
    """Raised when username or email is already registered."""

    pass


class UserNotFoundError(AuthenticationError):
    """Raised when user is not found."""

    pass


class AuthService:
    """Service for user accounts and token issue.

    Attributes:
        db: Async database session.
    """

    def __init__(
        self,
        db: AsyncSession,
        jwt_manager: JWTManager,
        password_hasher: PasswordHasher,
    ) -> None:
        """Initialize auth service.

        Args:
            db: Async database session.
            jwt_manager: Issues access tokens.
            password_hasher: Hashes and checks passwords.
        """
        self.db = db
        self.users = UserRepository(db)
        self._jwt = jwt_manager
        self._hasher = password_hasher

    async def register(self, username: str, email: str, password: str) -> TokenResponse:
        """Register a new user with the student role.

        Args:
            username: Unique username.
            email: Unique email address.
            password: Plain text password.

        Returns:
            Access token for the new user.

        Raises:
            UserExistsError: If username or email is taken.
        """
        email = email.lower()
        if await self.users.find_one(email=email) is not None:
            raise UserExistsError(f"Email {email} is already registered")
        if await self.users.find_one(username=username) is not None:
            raise UserExistsError(f"Username {username} is already taken")

        user = await self.users.create(
            {
                "username": username,
                "email": email,
                "password_hash": self._hasher.hash(password),
                "role": "student",
            }
        )

        logger.info("Registered user: %s (%s)", user.username, user.id)

        return self._issue_token(user)

    async def login(self, email: str, password: str) -> TokenResponse:
        """Authenticate a user by email and password.

        Raises:
            InvalidCredentialsError: If the email is unknown or the
                password is wrong.
        """
        user = await self.users.find_one(email=email.lower())
        if user is None or not self._hasher.verify(password, user.password_hash):
            logger.debug("Login failed for %s", email)
            raise InvalidCredentialsError()

        logger.info("User logged in: %s", user.id)

        return self._issue_token(user)

    async def get_user(self, user_id: str) -> UserResponse:
        """Get user by ID.

        Raises:
            UserNotFoundError: If user not found.
        """
        user = await self.users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(f"User {user_id} not found")
        return UserResponse.model_validate(user)

    async def list_users(self) -> list[UserResponse]:
        """List all users, newest first."""
        users = await self.users.find(order_by=(User.created_at.desc(),))
        return [UserResponse.model_validate(u) for u in users]

    async def update_role(self, user_id: str, role: str) -> UserResponse:
        """Change a user's role.

        Tokens already issued keep the old role until they expire.

        Raises:
            UserNotFoundError: If user not found.
        """
        user = await self.users.find_by_id_and_update(user_id, {"role": role})
        if user is None:
            raise UserNotFoundError(f"User {user_id} not found")

        logger.info("Changed role of user %s to %s", user_id, role)

        return UserResponse.model_validate(user)

    def _issue_token(self, user: User) -> TokenResponse:
        return TokenResponse(
            access_token=self._jwt.create_access_token(user.id, user.username, user.role),
            expires_in=self._jwt.expires_in,
            user=UserResponse.model_validate(user),
        )
