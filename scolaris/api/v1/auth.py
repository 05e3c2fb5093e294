# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Authentication API endpoints.

This module provides endpoints for user authentication:
- POST /register - Create an account (student role)
- POST /login - Exchange email and password for an access token
- POST /logout - End the session on the client side
- GET /me - Get current user info
- GET /users - List users (admin)
- PUT /users/{user_id}/role - Change a user's role (admin)

Tokens are stateless; logging out means the client discards its token.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from scolaris.api.dependencies import get_auth_service, require_admin, require_auth
from scolaris.api.middleware.auth import CurrentUser
from scolaris.api.middleware.rate_limit import RATE_LIMIT_AUTH, get_ip_only, limiter
from scolaris.domains.auth.service import (
    AuthService,
    InvalidCredentialsError,
    UserExistsError,
    UserNotFoundError,
)
from scolaris.models.auth import (
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    RoleUpdateRequest,
    TokenResponse,
    UserListResponse,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register",
)
@limiter.limit(RATE_LIMIT_AUTH, key_func=get_ip_only)
async def register(
    request: Request,
    data: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    """Create an account with the student role and log it in."""
    try:
        return await service.register(data.username, data.email, data.password)
    except UserExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.post("/login", response_model=TokenResponse, summary="Login")
@limiter.limit(RATE_LIMIT_AUTH, key_func=get_ip_only)
async def login(
    request: Request,
    data: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    try:
        return await service.login(data.email, data.password)
    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


@router.post("/logout", response_model=MessageResponse, summary="Logout")
async def logout(current_user: CurrentUser = Depends(require_auth)) -> MessageResponse:
    logger.info("User logged out: %s", current_user.id)
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=UserResponse, summary="Current user")
async def get_me(
    current_user: CurrentUser = Depends(require_auth),
    service: AuthService = Depends(get_auth_service),
) -> UserResponse:
    try:
        return await service.get_user(current_user.id)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/users", response_model=UserListResponse, summary="List users")
async def list_users(
    current_user: CurrentUser = Depends(require_admin),
    service: AuthService = Depends(get_auth_service),
) -> UserListResponse:
    users = await service.list_users()
    return UserListResponse(count=len(users), items=users)


@router.put("/users/{user_id}/role", response_model=UserResponse, summary="Change user role")
async def update_user_role(
    user_id: str,
    data: RoleUpdateRequest,
    current_user: CurrentUser = Depends(require_admin),
    service: AuthService = Depends(get_auth_service),
) -> UserResponse:
    try:
        return await service.update_role(user_id, data.role)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
