# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Integration tests for the grade endpoints.

Requests go through the full application stack (auth middleware, role
dependencies, error mapping) against a SQLite store.
"""

import pytest

pytestmark = pytest.mark.integration


def grade_body(school, **overrides) -> dict:
    body = {
        "student_id": school.s1,
        "class_id": school.c1,
        "subject_id": school.math,
        "teacher_id": school.t1,
        "trimester_id": school.tr1,
        "note": 14,
        "coefficient": 1,
    }
    body.update(overrides)
    return body


async def record_grade(client, auth_headers, school, **overrides) -> dict:
    response = await client.post(
        "/api/v1/grades",
        json=grade_body(school, **overrides),
        headers=auth_headers("teacher"),
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateGradeEndpoint:
    """Tests for POST /api/v1/grades."""

    @pytest.mark.asyncio
    async def test_teacher_records_grade(self, client, auth_headers, school):
        """Test a teacher can record a grade and references come back resolved."""
        response = await client.post(
            "/api/v1/grades",
            json=grade_body(school, comment="Bon trimestre", progress="up"),
            headers=auth_headers("teacher"),
        )

        assert response.status_code == 201
        data = response.json()
        assert data["class"]["name"] == "6ème A"
        assert data["student"] == {"id": school.s1, "last_name": "Roux", "first_name": "Hugo"}
        assert data["subject"]["name"] == "Mathématiques"
        assert data["trimester"]["name"] == "T1"
        assert data["progress"] == "up"
        assert "class_" not in data

    @pytest.mark.asyncio
    async def test_student_not_in_class(self, client, auth_headers, school):
        """Test a mismatched class gives 400 with a machine-readable code."""
        response = await client.post(
            "/api/v1/grades",
            json=grade_body(school, class_id=school.c2),
            headers=auth_headers("teacher"),
        )

        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["code"] == "student_not_in_class"
        assert detail["student_id"] == school.s1
        assert detail["class_id"] == school.c2

    @pytest.mark.asyncio
    async def test_unknown_teacher(self, client, auth_headers, school):
        """Test a missing teacher reference gives 404 naming the entity."""
        response = await client.post(
            "/api/v1/grades",
            json=grade_body(school, teacher_id="no-such-teacher"),
            headers=auth_headers("admin"),
        )

        assert response.status_code == 404
        detail = response.json()["detail"]
        assert detail["code"] == "not_found"
        assert detail["entity"] == "teacher"
        assert detail["id"] == "no-such-teacher"

    @pytest.mark.asyncio
    async def test_student_role_forbidden(self, client, auth_headers, school):
        """Test students cannot record grades."""
        response = await client.post(
            "/api/v1/grades",
            json=grade_body(school),
            headers=auth_headers("student"),
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_requires_token(self, client, school):
        """Test an anonymous request is rejected."""
        response = await client.post("/api/v1/grades", json=grade_body(school))

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_note_out_of_range(self, client, auth_headers, school):
        """Test a note above 20 fails validation."""
        response = await client.post(
            "/api/v1/grades",
            json=grade_body(school, note=25),
            headers=auth_headers("teacher"),
        )

        assert response.status_code == 422


class TestUpdateGradeEndpoint:
    """Tests for PUT and PATCH /api/v1/grades/{id}."""

    @pytest.mark.asyncio
    async def test_patch_note(self, client, auth_headers, school):
        """Test a partial update changes only the note."""
        grade = await record_grade(client, auth_headers, school)

        response = await client.patch(
            f"/api/v1/grades/{grade['id']}",
            json={"note": 19.5},
            headers=auth_headers("teacher"),
        )

        assert response.status_code == 200
        data = response.json()
        assert data["note"] == 19.5
        assert data["coefficient"] == 1
        assert data["student_id"] == school.s1

    @pytest.mark.asyncio
    async def test_put_student_of_other_class(self, client, auth_headers, school):
        """Test switching to a student outside the grade's class gives 400."""
        grade = await record_grade(client, auth_headers, school)

        response = await client.put(
            f"/api/v1/grades/{grade['id']}",
            json={"student_id": school.s4},
            headers=auth_headers("teacher"),
        )

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "student_not_in_class"

    @pytest.mark.asyncio
    async def test_clearing_reference_rejected(self, client, auth_headers, school):
        """Test an explicit null for a reference fails validation."""
        grade = await record_grade(client, auth_headers, school)

        response = await client.patch(
            f"/api/v1/grades/{grade['id']}",
            json={"class_id": None},
            headers=auth_headers("teacher"),
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_update_missing_grade(self, client, auth_headers, school):
        """Test updating an unknown grade gives 404."""
        response = await client.patch(
            "/api/v1/grades/ghost",
            json={"note": 10},
            headers=auth_headers("teacher"),
        )

        assert response.status_code == 404
        assert response.json()["detail"]["entity"] == "grade"


class TestGradeViews:
    """Tests for the listing endpoints."""

    @pytest.mark.asyncio
    async def test_flat_list_with_filter(self, client, auth_headers, school):
        """Test the flat list filters by subject."""
        await record_grade(client, auth_headers, school)
        await record_grade(client, auth_headers, school, subject_id=school.french)

        response = await client.get(
            "/api/v1/grades",
            params={"subject_id": school.french},
            headers=auth_headers("student"),
        )

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 1
        assert data["items"][0]["subject"]["name"] == "Français"

    @pytest.mark.asyncio
    async def test_grouped_by_subject(self, client, auth_headers, school):
        """Test group_by=subject counts subjects and grades separately."""
        for student_id in (school.s1, school.s2):
            await record_grade(client, auth_headers, school, student_id=student_id)
        await record_grade(client, auth_headers, school, subject_id=school.french)

        response = await client.get(
            "/api/v1/grades",
            params={"group_by": "subject", "class_id": school.c1},
            headers=auth_headers("student"),
        )

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 2
        assert data["total_grades"] == 3
        math_group = next(g for g in data["items"] if g["subject_id"] == school.math)
        assert [e["student"]["last_name"] for e in math_group["grades"]] == ["Bernard", "Roux"]

    @pytest.mark.asyncio
    async def test_unknown_group_by(self, client, auth_headers, school):
        """Test only subject grouping is accepted."""
        response = await client.get(
            "/api/v1/grades",
            params={"group_by": "teacher"},
            headers=auth_headers("student"),
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path",
        [
            "/api/v1/grades/teachers/{teacher_id}/students-grades",
            "/api/v1/teachers/{teacher_id}/students-grades",
        ],
    )
    async def test_teacher_view_routes(self, client, auth_headers, school, path):
        """Test both teacher view routes return the same grouping."""
        await record_grade(client, auth_headers, school)
        await record_grade(client, auth_headers, school, trimester_id=school.tr2)
        await record_grade(client, auth_headers, school, student_id=school.s2)
        await record_grade(client, auth_headers, school, teacher_id=school.t2)

        response = await client.get(path.format(teacher_id=school.t1), headers=auth_headers("teacher"))

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 2
        assert [g["student"]["last_name"] for g in data["items"]] == ["Bernard", "Roux"]
        roux = data["items"][1]
        assert roux["student"]["class"]["name"] == "6ème A"
        assert [e["trimester"]["name"] for e in roux["grades"]] == ["T1", "T2"]

    @pytest.mark.asyncio
    async def test_teacher_view_unknown_teacher(self, client, auth_headers, school):
        """Test the teacher view for a missing teacher gives 404."""
        response = await client.get(
            "/api/v1/teachers/ghost/students-grades",
            headers=auth_headers("teacher"),
        )

        assert response.status_code == 404
        assert response.json()["detail"]["entity"] == "teacher"


class TestDeleteGradeEndpoint:
    """Tests for DELETE /api/v1/grades/{id}."""

    @pytest.mark.asyncio
    async def test_teacher_cannot_delete(self, client, auth_headers, school):
        """Test deletion is reserved to admins."""
        grade = await record_grade(client, auth_headers, school)

        response = await client.delete(f"/api/v1/grades/{grade['id']}", headers=auth_headers("teacher"))

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_admin_deletes(self, client, auth_headers, school):
        """Test an admin deletes a grade and it is gone afterwards."""
        grade = await record_grade(client, auth_headers, school)

        response = await client.delete(f"/api/v1/grades/{grade['id']}", headers=auth_headers("admin"))
        assert response.status_code == 200
        assert response.json() == {"message": "Grade deleted"}

        response = await client.get(f"/api/v1/grades/{grade['id']}", headers=auth_headers("admin"))
        assert response.status_code == 404
