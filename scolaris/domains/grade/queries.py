# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Read-side grouping of grades.

Both views make a single pass over an already filtered grade list and
key groups by identifier in a dict, so groups keep first-seen order.
Only members within a group are sorted. Grades must have their
references loaded (see GradeRepository.populate_options).
"""

from __future__ import annotations

from collections.abc import Iterable

from scolaris.infrastructure.database.models import Grade, Student
from scolaris.models.grade import (
    StudentGradesGroup,
    SubjectGradeEntry,
    SubjectGradeGroup,
    TeacherGradeEntry,
)
from scolaris.models.student import StudentSummary, StudentWithClass
from scolaris.models.subject import SubjectSummary
from scolaris.models.teacher import TeacherSummary
from scolaris.models.trimester import TrimesterSummary


def _student_sort_key(student: Student | None, student_id: str) -> tuple:
    # Deleted students sort after existing ones.
    if student is None:
        return (1, "", "", student_id)
    return (0, student.last_name, student.first_name, student_id)


def _name_sort_key(record: object | None) -> tuple:
    if record is None:
        return (1, "")
    return (0, record.name)


def group_by_subject(grades: Iterable[Grade]) -> list[SubjectGradeGroup]:
    """Group grades by subject.

    Args:
        grades: Grades in the order groups should first appear.

    Returns:
        One group per subject; members sorted by student last name, then
        first name.
    """
    groups: dict[str, list[Grade]] = {}
    for grade in grades:
        groups.setdefault(grade.subject_id, []).append(grade)

    result = []
    for subject_id, members in groups.items():
        members.sort(key=lambda g: _student_sort_key(g.student, g.student_id))
        subject = members[0].subject
        result.append(
            SubjectGradeGroup(
                subject_id=subject_id,
                subject=SubjectSummary.model_validate(subject) if subject else None,
                grades=[
                    SubjectGradeEntry(
                        id=grade.id,
                        student=StudentSummary.model_validate(grade.student) if grade.student else None,
                        teacher=TeacherSummary.model_validate(grade.teacher) if grade.teacher else None,
                        note=grade.note,
                        coefficient=grade.coefficient,
                    )
                    for grade in members
                ],
            )
        )
    return result


def group_by_student(grades: Iterable[Grade]) -> list[StudentGradesGroup]:
    """Group one teacher's grades by student.

    Grades are sorted by student (last name, first name), then trimester
    name, then subject name before grouping, so groups come out in
    student order and members in trimester/subject order.

    Args:
        grades: Grades given by a single teacher.

    Returns:
        One group per student.
    """
    ordered = sorted(
        grades,
        key=lambda g: (
            _student_sort_key(g.student, g.student_id),
            _name_sort_key(g.trimester),
            _name_sort_key(g.subject),
        ),
    )

    groups: dict[str, StudentGradesGroup] = {}
    for grade in ordered:
        group = groups.get(grade.student_id)
        if group is None:
            group = StudentGradesGroup(
                student_id=grade.student_id,
                student=StudentWithClass.model_validate(grade.student) if grade.student else None,
                grades=[],
            )
            groups[grade.student_id] = group
        group.grades.append(
            TeacherGradeEntry(
                id=grade.id,
                subject=SubjectSummary.model_validate(grade.subject) if grade.subject else None,
                trimester=TrimesterSummary.model_validate(grade.trimester) if grade.trimester else None,
                note=grade.note,
                coefficient=grade.coefficient,
            )
        )
    return list(groups.values())
