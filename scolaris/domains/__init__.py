# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Domain services for Scolaris.

Each subpackage holds one service class working on an AsyncSession and
its own exception hierarchy.
"""
