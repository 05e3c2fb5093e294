# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""JWT access tokens using python-jose.

Tokens carry the user ID, username and role. There are no refresh
tokens; a client logs in again once the access token expires.

Example:
    >>> from scolaris.core.config import get_settings
    >>> jwt_manager = JWTManager(get_settings().jwt)
    >>> token = jwt_manager.create_access_token("user-123", "alice", "teacher")
    >>> jwt_manager.decode_token(token).role
    'teacher'
"""

import logging
import secrets
from datetime import timedelta

from jose import ExpiredSignatureError, JWTError as JoseJWTError, jwt
from pydantic import BaseModel, ValidationError

from scolaris.core.config.settings import JWTSettings
from scolaris.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class TokenPayload(BaseModel):
    """JWT access token claims.

    Attributes:
        sub: Subject (user ID).
        username: Username at issue time.
        role: Role at issue time (admin, teacher or student).
        exp: Expiration timestamp.
        iat: Issued at timestamp.
        jti: Token ID.
    """

    sub: str
    username: str
    role: str
    exp: int
    iat: int
    jti: str


class JWTError(Exception):
    """Base exception for JWT operations."""

    pass


class TokenExpiredError(JWTError):
    """Raised when a token has expired."""

    pass


class InvalidTokenError(JWTError):
    """Raised when a token is invalid."""

    pass


class JWTManager:
    """Creates and validates access tokens.

    Attributes:
        _settings: JWT configuration settings.
    """

    def __init__(self, settings: JWTSettings) -> None:
        self._settings = settings

    @property
    def expires_in(self) -> int:
        """Access token lifetime in seconds."""
        return self._settings.access_token_expire_minutes * 60

    def create_access_token(self, user_id: str, username: str, role: str) -> str:
        """Create an access token.

        Args:
            user_id: User identifier.
            username: Username.
            role: User role.

        Returns:
            Encoded JWT string.
        """
        now = utc_now()
        payload = {
            "sub": user_id,
            "username": username,
            "role": role,
            "exp": int((now + timedelta(seconds=self.expires_in)).timestamp()),
            "iat": int(now.timestamp()),
            "jti": secrets.token_urlsafe(16),
        }
        return jwt.encode(
            payload,
            self._settings.secret_key.get_secret_value(),
            algorithm=self._settings.algorithm,
        )

    def decode_token(self, token: str) -> TokenPayload:
        """Decode and validate an access token.

        Args:
            token: JWT string.

        Returns:
            Decoded claims.

        Raises:
            TokenExpiredError: If the token has expired.
            InvalidTokenError: If the signature or claims are invalid.
        """
        try:
            payload = jwt.decode(
                token,
                self._settings.secret_key.get_secret_value(),
                algorithms=[self._settings.algorithm],
            )
            return TokenPayload.model_validate(payload)
        except ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired") from e
        except (JoseJWTError, ValidationError) as e:
            logger.warning("Token decode failed: %s", e)
            raise InvalidTokenError(f"Invalid token: {e}") from e
