# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Demo school seed data.

This module seeds a small, consistent school:
- Teachers, one class per teacher
- Students spread over the classes
- Subjects and three trimesters
- Grades whose class always matches the student's class
- An admin account

Seeding is skipped when the admin account already exists.

Usage:
    python -m scolaris.infrastructure.database.seeds.school
"""

import asyncio
import logging
from datetime import date
from itertools import cycle
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from scolaris.domains.auth.password import PasswordHasher
from scolaris.infrastructure.database.models import (
    Class,
    Grade,
    Student,
    Subject,
    Teacher,
    Trimester,
    User,
)

logger = logging.getLogger(__name__)

ADMIN_EMAIL = "admin@scolaris.org"

TEACHERS = [
    ("Dubois", "Marie", "FEMALE", date(1985, 3, 15), "12 Rue de la République, 75001 Paris"),
    ("Martin", "Jean", "MALE", date(1980, 7, 22), "45 Avenue des Champs-Élysées, 75008 Paris"),
    ("Lefebvre", "Sophie", "FEMALE", date(1990, 11, 8), "78 Boulevard Saint-Germain, 75005 Paris"),
]

CLASS_NAMES = ["6ème A", "5ème B", "4ème C"]

STUDENTS = [
    ("Bernard", "Lucas", "MALE", date(2012, 1, 10)),
    ("Petit", "Emma", "FEMALE", date(2012, 4, 2)),
    ("Roux", "Hugo", "MALE", date(2011, 9, 23)),
    ("Fournier", "Léa", "FEMALE", date(2011, 6, 5)),
    ("Girard", "Nathan", "MALE", date(2010, 12, 1)),
    ("Bonnet", "Chloé", "FEMALE", date(2010, 2, 17)),
]

SUBJECTS = ["Mathématiques", "Français", "Histoire-Géographie", "Anglais"]

TRIMESTERS = [
    ("T1", date(2024, 9, 2)),
    ("T2", date(2024, 12, 2)),
    ("T3", date(2025, 3, 3)),
]


async def _add_all(session: AsyncSession, model: type, rows: list[dict[str, Any]]) -> list[Any]:
    records = [model(**row) for row in rows]
    session.add_all(records)
    await session.flush()
    logger.info("Seeded %d %s", len(records), model.__tablename__)
    return records


async def seed_school_database(
    session: AsyncSession,
    admin_password: str = "Admin*12345",
) -> dict[str, list[Any]]:
    """Seed the demo school.

    Args:
        session: Database session.
        admin_password: Password for the admin account.

    Returns:
        Dictionary of seeded records by table, empty when skipped.
    """
    existing = await session.execute(select(User).where(User.email == ADMIN_EMAIL))
    if existing.scalar_one_or_none() is not None:
        logger.info("Admin account exists, skipping seed")
        return {}

    teachers = await _add_all(
        session,
        Teacher,
        [
            {"last_name": ln, "first_name": fn, "gender": g, "birth_date": bd, "address": addr}
            for ln, fn, g, bd, addr in TEACHERS
        ],
    )
    classes = await _add_all(
        session,
        Class,
        [{"name": name, "teacher_id": t.id} for name, t in zip(CLASS_NAMES, teachers)],
    )
    students = await _add_all(
        session,
        Student,
        [
            {"last_name": ln, "first_name": fn, "gender": g, "birth_date": bd, "class_id": c.id}
            for (ln, fn, g, bd), c in zip(STUDENTS, cycle(classes))
        ],
    )
    subjects = await _add_all(session, Subject, [{"name": name} for name in SUBJECTS])
    trimesters = await _add_all(
        session,
        Trimester,
        [{"name": name, "date": d} for name, d in TRIMESTERS],
    )

    teacher_by_class = {c.id: c.teacher_id for c in classes}
    grade_rows = []
    for s_index, student in enumerate(students):
        for j_index, subject in enumerate(subjects):
            grade_rows.append(
                {
                    "student_id": student.id,
                    "class_id": student.class_id,
                    "subject_id": subject.id,
                    "teacher_id": teacher_by_class[student.class_id],
                    "trimester_id": trimesters[0].id,
                    "note": float(8 + (s_index * 3 + j_index * 5) % 12),
                    "coefficient": 2.0 if j_index == 0 else 1.0,
                }
            )
    grades = await _add_all(session, Grade, grade_rows)

    users = await _add_all(
        session,
        User,
        [
            {
                "username": "admin",
                "email": ADMIN_EMAIL,
                "password_hash": PasswordHasher().hash(admin_password),
                "role": "admin",
            }
        ],
    )

    await session.commit()

    logger.info("School seeding complete")

    return {
        "teachers": teachers,
        "classes": classes,
        "students": students,
        "subjects": subjects,
        "trimesters": trimesters,
        "grades": grades,
        "users": users,
    }


if __name__ == "__main__":
    from scolaris.core.config import get_settings
    from scolaris.infrastructure.database.connection import (
        close_database,
        get_session,
        init_database,
    )
    from scolaris.utils.logging import setup_logging

    async def main() -> None:
        settings = get_settings()
        setup_logging(settings)
        await init_database(settings)
        try:
            async with get_session() as session:
                await seed_school_database(session)
        finally:
            await close_database()

    asyncio.run(main())
