# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typed conversion of environment values."""

from __future__ import annotations

from .filters import (
    FilterMode,
    FilterResult,
    Filters,
    filter_bool,
    filter_int,
    filter_int_or_bool,
    filter_octal_mod,
    filter_string,
)

__all__ = [
    "FilterMode",
    "FilterResult",
    "Filters",
    "filter_bool",
    "filter_int",
    "filter_int_or_bool",
    "filter_octal_mod",
    "filter_string",
]
