# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""API v1 routes package.

This package contains all v1 API endpoint definitions.
Each module provides a FastAPI router for a specific domain.

Modules:
    auth: Registration, login and user role management.
    teachers: Teacher CRUD and the per-teacher grade view.
    classes: Class CRUD.
    students: Student CRUD.
    subjects: Subject CRUD.
    trimesters: Trimester CRUD.
    grades: Grade recording, updates and grade views.
"""

from fastapi import APIRouter

from scolaris.api.v1 import auth, classes, grades, students, subjects, teachers, trimesters

# Create the main v1 router
router = APIRouter(prefix="/api/v1")

# Include domain routers
router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
router.include_router(teachers.router, prefix="/teachers", tags=["Teachers"])
router.include_router(classes.router, prefix="/classes", tags=["Classes"])
router.include_router(students.router, prefix="/students", tags=["Students"])
router.include_router(subjects.router, prefix="/subjects", tags=["Subjects"])
router.include_router(trimesters.router, prefix="/trimesters", tags=["Trimesters"])
router.include_router(grades.router, prefix="/grades", tags=["Grades"])

__all__ = ["router"]
