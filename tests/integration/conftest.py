# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest fixtures for store-backed integration tests.

Provides a small school created through the services, so every record
has passed the same checks the API applies, and an HTTP client bound to
the application in-process.
"""

from collections.abc import AsyncGenerator
from dataclasses import dataclass
from datetime import date

import httpx
import pytest_asyncio

from scolaris.api.app import create_app
from scolaris.api.dependencies import get_password_hasher
from scolaris.domains.auth.password import PasswordHasher
from scolaris.domains.class_.service import ClassService
from scolaris.domains.student.service import StudentService
from scolaris.domains.subject.service import SubjectService
from scolaris.domains.teacher.service import TeacherService
from scolaris.domains.trimester.service import TrimesterService
from scolaris.models.class_ import ClassCreateRequest
from scolaris.models.student import StudentCreateRequest
from scolaris.models.subject import SubjectCreateRequest
from scolaris.models.teacher import TeacherCreateRequest
from scolaris.models.trimester import TrimesterCreateRequest


@dataclass
class School:
    """Identifiers of the seeded school.

    Students s1..s3 are in class c1 (teacher t1), s4 is in c2 (teacher t2).
    """

    t1: str
    t2: str
    c1: str
    c2: str
    s1: str
    s2: str
    s3: str
    s4: str
    math: str
    french: str
    tr1: str
    tr2: str


async def _add_teacher(db, last_name: str, first_name: str) -> str:
    teacher = await TeacherService(db).create_teacher(
        TeacherCreateRequest(
            last_name=last_name,
            first_name=first_name,
            birth_date=date(1980, 5, 1),
            gender="FEMALE",
        )
    )
    return teacher.id


async def _add_student(db, last_name: str, first_name: str, class_id: str) -> str:
    student = await StudentService(db).create_student(
        StudentCreateRequest(
            last_name=last_name,
            first_name=first_name,
            birth_date=date(2012, 2, 1),
            gender="MALE",
            class_id=class_id,
        )
    )
    return student.id


@pytest_asyncio.fixture
async def school(db_session) -> School:
    """Two teachers, two classes, four students, two subjects, two trimesters."""
    t1 = await _add_teacher(db_session, "Dubois", "Marie")
    t2 = await _add_teacher(db_session, "Martin", "Jean")

    classes = ClassService(db_session)
    c1 = (await classes.create_class(ClassCreateRequest(name="6ème A", teacher_id=t1))).id
    c2 = (await classes.create_class(ClassCreateRequest(name="5ème B", teacher_id=t2))).id

    subjects = SubjectService(db_session)
    math = (await subjects.create_subject(SubjectCreateRequest(name="Mathématiques"))).id
    french = (await subjects.create_subject(SubjectCreateRequest(name="Français"))).id

    trimesters = TrimesterService(db_session)
    tr1 = (await trimesters.create_trimester(TrimesterCreateRequest(name="T1", date=date(2024, 9, 2)))).id
    tr2 = (await trimesters.create_trimester(TrimesterCreateRequest(name="T2", date=date(2024, 12, 2)))).id

    return School(
        t1=t1,
        t2=t2,
        c1=c1,
        c2=c2,
        s1=await _add_student(db_session, "Roux", "Hugo", c1),
        s2=await _add_student(db_session, "Bernard", "Lucas", c1),
        s3=await _add_student(db_session, "Petit", "Emma", c1),
        s4=await _add_student(db_session, "Fournier", "Léa", c2),
        math=math,
        french=french,
        tr1=tr1,
        tr2=tr2,
    )


@pytest_asyncio.fixture
async def client(school_db) -> AsyncGenerator[httpx.AsyncClient, None]:
    """HTTP client for the application on the test database.

    Password hashing uses the minimum bcrypt cost to keep auth tests fast.
    """
    app = create_app()
    app.dependency_overrides[get_password_hasher] = lambda: PasswordHasher(rounds=4)

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
