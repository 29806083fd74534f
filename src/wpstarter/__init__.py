# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Scaffold WordPress installations by running ordered, idempotent setup steps."""

from __future__ import annotations

__version__ = "3.0.0"

__all__ = ["__version__"]
