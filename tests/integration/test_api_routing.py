# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Integration tests for route registration and error mapping.

The grade service is patched so these tests need no database; they
check how endpoints translate service outcomes into HTTP responses.
"""

from collections.abc import AsyncGenerator, Iterator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from scolaris.api.app import create_app
from scolaris.api.dependencies import get_db
from scolaris.domains.grade.service import (
    GradeNotFoundError,
    ReferenceNotFoundError,
    StudentNotInClassError,
)
from scolaris.infrastructure.database.connection import DatabaseError

GRADE_BODY = {
    "student_id": "s1",
    "class_id": "c1",
    "subject_id": "math",
    "teacher_id": "t1",
    "trimester_id": "tr1",
    "note": 12,
    "coefficient": 1,
}


async def fake_db() -> AsyncGenerator[MagicMock, None]:
    yield MagicMock()


@pytest.fixture
def app():
    application = create_app()
    application.dependency_overrides[get_db] = fake_db
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def grade_service() -> Iterator[AsyncMock]:
    """Patch the grade router's service factory."""
    service = AsyncMock()
    with patch("scolaris.api.v1.grades._get_service", return_value=service):
        yield service


class TestRouteRegistration:
    """Tests that every resource is mounted under /api/v1."""

    def test_resource_routes_registered(self, app) -> None:
        paths = app.openapi()["paths"]

        for expected in (
            "/api/v1/auth/login",
            "/api/v1/teachers",
            "/api/v1/teachers/{teacher_id}/students-grades",
            "/api/v1/classes",
            "/api/v1/students",
            "/api/v1/subjects",
            "/api/v1/trimesters",
            "/api/v1/grades",
            "/api/v1/grades/{grade_id}",
            "/api/v1/grades/teachers/{teacher_id}/students-grades",
            "/health",
            "/health/live",
            "/health/ready",
        ):
            assert expected in paths

    def test_grade_update_accepts_put_and_patch(self, app) -> None:
        methods = set(app.openapi()["paths"]["/api/v1/grades/{grade_id}"])

        assert {"get", "put", "patch", "delete"} <= methods

    def test_teacher_list_documents_class_filter(self, app) -> None:
        operation = app.openapi()["paths"]["/api/v1/teachers"]["get"]

        assert "class_id" in {p["name"] for p in operation["parameters"]}


class TestGradeErrorMapping:
    """Tests for translating grade service errors."""

    def test_reference_not_found_is_404(self, client, grade_service, auth_headers) -> None:
        grade_service.create_grade.side_effect = ReferenceNotFoundError("subject", "math")

        response = client.post("/api/v1/grades", json=GRADE_BODY, headers=auth_headers("teacher"))

        assert response.status_code == 404
        assert response.json()["detail"] == {
            "code": "not_found",
            "entity": "subject",
            "id": "math",
            "message": "Referenced subject math not found",
        }

    def test_student_not_in_class_is_400(self, client, grade_service, auth_headers) -> None:
        grade_service.update_grade.side_effect = StudentNotInClassError("s1", "c2", "c1")

        response = client.patch(
            "/api/v1/grades/g1",
            json={"class_id": "c2"},
            headers=auth_headers("teacher"),
        )

        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["code"] == "student_not_in_class"
        assert detail["message"] == "Student s1 is not in the specified class c2"

    def test_grade_not_found_is_404(self, client, grade_service, auth_headers) -> None:
        grade_service.get_grade.side_effect = GradeNotFoundError("g404")

        response = client.get("/api/v1/grades/g404", headers=auth_headers("student"))

        assert response.status_code == 404
        assert response.json()["detail"]["entity"] == "grade"

    def test_database_error_is_503(self, client, grade_service, auth_headers) -> None:
        grade_service.list_grades.side_effect = DatabaseError("Database operation failed")

        response = client.get("/api/v1/grades", headers=auth_headers("student"))

        assert response.status_code == 503
        assert response.json()["detail"]["code"] == "database_unavailable"

    def test_update_passes_only_sent_fields(self, client, grade_service, auth_headers) -> None:
        grade_service.update_grade.side_effect = GradeNotFoundError("g1")

        client.patch("/api/v1/grades/g1", json={"comment": None}, headers=auth_headers("teacher"))

        grade_id, request = grade_service.update_grade.call_args.args
        assert grade_id == "g1"
        assert request.changes() == {"comment": None}

    def test_flat_list_filters_forwarded(self, client, grade_service, auth_headers) -> None:
        grade_service.list_grades.return_value = []

        response = client.get(
            "/api/v1/grades",
            params={"class_id": "c1", "trimester_id": "tr1"},
            headers=auth_headers("student"),
        )

        assert response.status_code == 200
        assert response.json() == {"count": 0, "items": []}
        filters = grade_service.list_grades.call_args.args[0]
        assert filters.as_dict() == {"class_id": "c1", "trimester_id": "tr1"}

    def test_grouped_view_ignores_other_filters(self, client, grade_service, auth_headers) -> None:
        grade_service.list_grades_grouped_by_subject.return_value = []

        response = client.get(
            "/api/v1/grades",
            params={"group_by": "subject", "class_id": "c1", "student_id": "s1"},
            headers=auth_headers("student"),
        )

        assert response.status_code == 200
        assert response.json() == {"count": 0, "total_grades": 0, "items": []}
        grade_service.list_grades_grouped_by_subject.assert_awaited_once_with(
            class_id="c1",
            trimester_id=None,
        )


class TestHealthEndpoints:
    """Tests for health checks without a database."""

    def test_liveness(self, client) -> None:
        response = client.get("/health/live")

        assert response.status_code == 200
        assert response.json() == {"status": "alive"}

    def test_health_without_database(self, client) -> None:
        """Test /health reports 503 when no database is reachable."""
        response = client.get("/health")

        assert response.status_code == 503
        assert response.json()["database"]["status"] == "unhealthy"

    def test_readiness_without_database(self, client) -> None:
        response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["ready"] is False
