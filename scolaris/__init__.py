"""Scolaris Backend.

School administration backend: teachers, classes, students, subjects,
trimesters and grades, with referential consistency checks on grades.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
