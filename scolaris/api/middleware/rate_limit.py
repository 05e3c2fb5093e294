# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Rate limiting using slowapi.

A default per-client limit applies to every route through
SlowAPIMiddleware. Authentication endpoints carry a stricter
per-IP limit.

Example:
    @router.post("/login")
    @limiter.limit(RATE_LIMIT_AUTH, key_func=get_ip_only)
    async def login(request: Request, ...):
        ...
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from scolaris.core.config import get_settings

logger = logging.getLogger(__name__)

RATE_LIMIT_AUTH = "20/minute"


def get_client_identifier(request: Request) -> str:
    """Identify the client by user ID when authenticated, else by IP."""
    user = getattr(request.state, "user", None)
    if user:
        return f"user:{user.id}"
    return f"ip:{get_remote_address(request)}"


def get_ip_only(request: Request) -> str:
    """Get client IP address only, for unauthenticated endpoints."""
    return get_remote_address(request)


settings = get_settings()
limiter = Limiter(
    key_func=get_client_identifier,
    default_limits=[f"{settings.rate_limit.requests_per_minute}/minute"],
    storage_uri=settings.rate_limit.storage_uri,
    enabled=settings.rate_limit.enabled,
)


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Return 429 Too Many Requests."""
    logger.warning("Rate limit exceeded: %s for %s", exc.detail, get_client_identifier(request))

    return JSONResponse(
        status_code=429,
        content={"detail": "Too many requests. Please try again later."},
        headers={"Retry-After": "60"},
    )
