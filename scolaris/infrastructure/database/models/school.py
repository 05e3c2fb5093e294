# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""School models: teachers, classes, students, subjects, trimesters, grades.

References between records are plain identifier columns, not database
foreign keys. Deleting a referenced record never cascades; relationships
are view-only and load None when the referenced record is gone.
"""

import datetime as dt
from typing import Optional

from sqlalchemy import CheckConstraint, Date, Float, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from scolaris.infrastructure.database.models.base import Base, IdMixin, TimestampMixin

GENDERS = ("MALE", "FEMALE")
PROGRESS_VALUES = ("up", "stable", "down")


class Teacher(IdMixin, TimestampMixin, Base):
    """A teacher. Has no outgoing references."""

    __tablename__ = "teachers"
    __table_args__ = (
        CheckConstraint("gender IN ('MALE', 'FEMALE')", name="valid_teacher_gender"),
    )

    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    birth_date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    address: Mapped[Optional[str]] = mapped_column(String(250), nullable=True)
    gender: Mapped[str] = mapped_column(String(10), nullable=False)

    def __repr__(self) -> str:
        return f"<Teacher {self.id} {self.last_name} {self.first_name}>"


class Class(IdMixin, TimestampMixin, Base):
    """A class, assigned to exactly one teacher."""

    __tablename__ = "classes"

    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    teacher_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)

    teacher: Mapped[Optional[Teacher]] = relationship(
        Teacher,
        primaryjoin="foreign(Class.teacher_id) == Teacher.id",
        viewonly=True,
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Class {self.id} {self.name}>"


class Student(IdMixin, TimestampMixin, Base):
    """A student, belonging to exactly one class at a time."""

    __tablename__ = "students"
    __table_args__ = (
        CheckConstraint("gender IN ('MALE', 'FEMALE')", name="valid_student_gender"),
    )

    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    birth_date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    address: Mapped[Optional[str]] = mapped_column(String(250), nullable=True)
    gender: Mapped[str] = mapped_column(String(10), nullable=False)
    class_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)

    class_: Mapped[Optional[Class]] = relationship(
        Class,
        primaryjoin="foreign(Student.class_id) == Class.id",
        viewonly=True,
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Student {self.id} {self.last_name} {self.first_name}>"


class Subject(IdMixin, TimestampMixin, Base):
    """A taught subject."""

    __tablename__ = "subjects"

    name: Mapped[str] = mapped_column(String(250), unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Subject {self.id} {self.name}>"


class Trimester(IdMixin, TimestampMixin, Base):
    """A grading period."""

    __tablename__ = "trimesters"

    name: Mapped[str] = mapped_column(String(10), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)

    def __repr__(self) -> str:
        return f"<Trimester {self.id} {self.name}>"


class Grade(IdMixin, TimestampMixin, Base):
    """A student's score in a subject, under a teacher, in a class and trimester.

    Pure association record: owns nothing, deleted without side effects.
    """

    __tablename__ = "grades"
    __table_args__ = (
        CheckConstraint("note >= 0 AND note <= 20", name="valid_grade_note"),
        CheckConstraint("coefficient > 0", name="valid_grade_coefficient"),
        Index("ix_grades_student_subject_trimester", "student_id", "subject_id", "trimester_id"),
    )

    student_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    class_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    subject_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    teacher_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    trimester_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    note: Mapped[float] = mapped_column(Float, nullable=False)
    coefficient: Mapped[float] = mapped_column(Float, nullable=False)
    comment: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    progress: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)

    student: Mapped[Optional[Student]] = relationship(
        Student,
        primaryjoin="foreign(Grade.student_id) == Student.id",
        viewonly=True,
        lazy="raise",
    )
    class_: Mapped[Optional[Class]] = relationship(
        Class,
        primaryjoin="foreign(Grade.class_id) == Class.id",
        viewonly=True,
        lazy="raise",
    )
    subject: Mapped[Optional[Subject]] = relationship(
        Subject,
        primaryjoin="foreign(Grade.subject_id) == Subject.id",
        viewonly=True,
        lazy="raise",
    )
    teacher: Mapped[Optional[Teacher]] = relationship(
        Teacher,
        primaryjoin="foreign(Grade.teacher_id) == Teacher.id",
        viewonly=True,
        lazy="raise",
    )
    trimester: Mapped[Optional[Trimester]] = relationship(
        Trimester,
        primaryjoin="foreign(Grade.trimester_id) == Trimester.id",
        viewonly=True,
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Grade {self.id} student={self.student_id} note={self.note}>"
