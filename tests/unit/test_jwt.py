# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for JWT token utilities.

Tests the JWTManager class and token operations.
"""

from unittest.mock import MagicMock
from uuid import uuid4

import pytest
from jose import jwt
from pydantic import SecretStr

from scolaris.domains.auth.jwt import (
    InvalidTokenError,
    JWTManager,
    TokenExpiredError,
    TokenPayload,
)


@pytest.fixture
def jwt_settings() -> MagicMock:
    """Create mock JWT settings."""
    settings = MagicMock()
    settings.secret_key = SecretStr("test-secret-key-for-jwt-testing")
    settings.algorithm = "HS256"
    settings.access_token_expire_minutes = 30
    return settings


@pytest.fixture
def jwt_manager(jwt_settings: MagicMock) -> JWTManager:
    """Create JWT manager with test settings."""
    return JWTManager(jwt_settings)


class TestJWTManager:
    """Tests for JWTManager class."""

    def test_expires_in_seconds(self, jwt_manager: JWTManager) -> None:
        """Test token lifetime is reported in seconds."""
        assert jwt_manager.expires_in == 30 * 60

    def test_decode_access_token_returns_payload(self, jwt_manager: JWTManager) -> None:
        """Test that decode_token returns the claims the token was issued with."""
        user_id = str(uuid4())

        token = jwt_manager.create_access_token(user_id, "mdubois", "teacher")
        payload = jwt_manager.decode_token(token)

        assert isinstance(payload, TokenPayload)
        assert payload.sub == user_id
        assert payload.username == "mdubois"
        assert payload.role == "teacher"
        assert payload.exp - payload.iat == 30 * 60

    def test_each_token_has_unique_jti(self, jwt_manager: JWTManager) -> None:
        """Test two tokens for the same user differ."""
        first = jwt_manager.decode_token(jwt_manager.create_access_token("u1", "a", "student"))
        second = jwt_manager.decode_token(jwt_manager.create_access_token("u1", "a", "student"))

        assert first.jti != second.jti

    def test_decode_expired_token_raises_error(self, jwt_settings: MagicMock) -> None:
        """Test that decode_token raises error for expired token."""
        jwt_settings.access_token_expire_minutes = -1
        manager = JWTManager(jwt_settings)

        token = manager.create_access_token("u1", "a", "student")

        with pytest.raises(TokenExpiredError, match="Token has expired"):
            manager.decode_token(token)

    def test_decode_invalid_token_raises_error(self, jwt_manager: JWTManager) -> None:
        """Test that decode_token raises error for malformed token."""
        with pytest.raises(InvalidTokenError):
            jwt_manager.decode_token("not.a.token")

    def test_decode_token_with_wrong_secret_raises_error(
        self,
        jwt_manager: JWTManager,
        jwt_settings: MagicMock,
    ) -> None:
        """Test that a token signed with another key is rejected."""
        other_settings = MagicMock()
        other_settings.secret_key = SecretStr("another-secret")
        other_settings.algorithm = "HS256"
        other_settings.access_token_expire_minutes = 30
        token = JWTManager(other_settings).create_access_token("u1", "a", "admin")

        with pytest.raises(InvalidTokenError):
            jwt_manager.decode_token(token)

    def test_decode_token_missing_claims_raises_error(self, jwt_settings: MagicMock) -> None:
        """Test that a correctly signed token without the role claim is rejected."""
        token = jwt.encode(
            {"sub": "u1", "exp": 4102444800},
            jwt_settings.secret_key.get_secret_value(),
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            JWTManager(jwt_settings).decode_token(token)
