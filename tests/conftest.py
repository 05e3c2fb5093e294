# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across all test types:
- Unit tests (mocked sessions and repositories)
- Integration tests (file-backed SQLite store, real API stack)

Environment defaults are set before any scolaris import so cached
settings and the module-level rate limiter pick them up.
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-testing-only")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from collections.abc import AsyncGenerator, Callable  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from scolaris.core.config import clear_settings_cache, get_settings  # noqa: E402
from scolaris.core.config.settings import Settings  # noqa: E402
from scolaris.domains.auth.jwt import JWTManager  # noqa: E402
from scolaris.infrastructure.database.connection import (  # noqa: E402
    close_database,
    get_engine,
    get_sessionmaker,
    init_database,
)
from scolaris.infrastructure.database.models import Base  # noqa: E402


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (uses a SQLite store)"
    )


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def school_db(tmp_path, monkeypatch) -> AsyncGenerator[Settings, None]:
    """Initialize the global database on a fresh SQLite file.

    Yields:
        Settings the database was initialized with.
    """
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'scolaris.db'}")
    clear_settings_cache()
    settings = get_settings()

    await init_database(settings)
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield settings

    await close_database()
    clear_settings_cache()


@pytest_asyncio.fixture
async def db_session(school_db) -> AsyncGenerator[AsyncSession, None]:
    """Provide a session on the initialized test database."""
    async with get_sessionmaker()() as session:
        yield session


# =============================================================================
# Auth Fixtures
# =============================================================================


@pytest.fixture
def jwt_manager() -> JWTManager:
    """JWT manager using the test secret."""
    return JWTManager(get_settings().jwt)


@pytest.fixture
def auth_headers(jwt_manager) -> Callable[..., dict[str, str]]:
    """Build Authorization headers for a given role.

    Example:
        client.get("/api/v1/grades", headers=auth_headers("teacher"))
    """

    def _headers(role: str = "admin", user_id: str = "user-1", username: str = "tester") -> dict[str, str]:
        token = jwt_manager.create_access_token(user_id, username, role)
        return {"Authorization": f"Bearer {token}"}

    return _headers


# =============================================================================
# Helper Fixtures
# =============================================================================


@pytest.fixture
def sample_teacher_data() -> dict[str, str]:
    """Provide sample teacher payload for testing."""
    return {
        "last_name": "Dubois",
        "first_name": "Marie",
        "birth_date": "1985-03-15",
        "address": "12 Rue de la République, 75001 Paris",
        "gender": "FEMALE",
    }
