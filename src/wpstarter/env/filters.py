# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filters assigning proper types to environment variables.

Environment variables are always strings, but the WordPress configuration they
feed needs booleans, integers and file modes: ``"false"`` must become ``False``.
Each filter returns a :class:`FilterResult`; :meth:`Filters.filter` collapses an
invalid result to ``None`` so callers fall back to their default.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Final, TypeAlias, cast

FilteredValue: TypeAlias = bool | int | str | None

_TRUE: Final[frozenset[str]] = frozenset({"1", "true", "on", "yes"})
_FALSE: Final[frozenset[str]] = frozenset({"0", "false", "off", "no"})
_NUMERIC_RE: Final[re.Pattern[str]] = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")
_INT_RE: Final[re.Pattern[str]] = re.compile(r"^\s*[+-]?\d+\s*$")
_OCTAL_RE: Final[re.Pattern[str]] = re.compile(r"^\s*[0-7]+\s*$")
_TAG_RE: Final[re.Pattern[str]] = re.compile(r"<[^>]*>?")
_MAX_MOD: Final[int] = 0o777


class FilterMode(StrEnum):
    BOOL = "bool"
    INT = "int"
    INT_OR_BOOL = "int|bool"
    STRING = "string"
    OCTAL_MOD = "mod"


@dataclass(frozen=True, slots=True)
class FilterResult:
    """Outcome of a filter: a typed value, or an invalid marker."""

    value: FilteredValue = None
    valid: bool = False

    @classmethod
    def ok(cls, value: FilteredValue) -> FilterResult:
        return cls(value=value, valid=True)

    @classmethod
    def invalid(cls) -> FilterResult:
        return cls()


def _is_numeric(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    return isinstance(value, str) and _NUMERIC_RE.match(value) is not None


def filter_bool(value: object) -> FilterResult:
    if value is None or value == "":
        return FilterResult.invalid()
    if isinstance(value, bool):
        return FilterResult.ok(value)
    if isinstance(value, int):
        return FilterResult.ok(value == 1) if value in (0, 1) else FilterResult.invalid()
    if not isinstance(value, str):
        return FilterResult.invalid()
    normalized = value.strip().lower()
    if normalized in _TRUE:
        return FilterResult.ok(True)
    if normalized in _FALSE:
        return FilterResult.ok(False)
    return FilterResult.invalid()


def filter_int(value: object) -> FilterResult:
    if isinstance(value, bool):
        return FilterResult.ok(int(value))
    if not _is_numeric(value):
        return FilterResult.invalid()
    if isinstance(value, int):
        return FilterResult.ok(value)
    if isinstance(value, str) and _INT_RE.match(value):
        return FilterResult.ok(int(value.strip()))
    number = float(value.strip()) if isinstance(value, str) else float(cast(float, value))
    return FilterResult.ok(int(number)) if math.isfinite(number) else FilterResult.invalid()


def filter_string(value: object) -> FilterResult:
    """Strip tags and NUL bytes, then encode quotes as numeric entities."""

    if isinstance(value, bool):
        return FilterResult.ok("1" if value else "")
    if not isinstance(value, (str, int, float)):
        return FilterResult.invalid()
    cleaned = _TAG_RE.sub("", str(value)).replace("\x00", "")
    return FilterResult.ok(cleaned.replace("'", "&#39;").replace('"', "&#34;"))


def filter_int_or_bool(value: object) -> FilterResult:
    return filter_int(value) if _is_numeric(value) else filter_bool(value)


def filter_octal_mod(value: object) -> FilterResult:
    if isinstance(value, int) and not isinstance(value, bool):
        return FilterResult.ok(value) if 0 <= value <= _MAX_MOD else FilterResult.invalid()
    if not isinstance(value, str) or not _OCTAL_RE.match(value):
        return FilterResult.invalid()
    mode = int(value.strip(), 8)
    return FilterResult.ok(mode) if mode <= _MAX_MOD else FilterResult.invalid()


_FILTERS = {
    FilterMode.BOOL: filter_bool,
    FilterMode.INT: filter_int,
    FilterMode.INT_OR_BOOL: filter_int_or_bool,
    FilterMode.STRING: filter_string,
    FilterMode.OCTAL_MOD: filter_octal_mod,
}


class Filters:
    """Apply a typed filter selected by mode to raw environment values."""

    def apply(self, mode: FilterMode | str, value: object) -> FilterResult:
        try:
            selected = FilterMode(mode)
        except ValueError:
            return FilterResult.invalid()
        return _FILTERS[selected](value)

    def filter(self, mode: FilterMode | str, value: object) -> FilteredValue:
        """Return ``value`` converted according to ``mode``, or ``None`` when invalid."""

        result = self.apply(mode, value)
        return result.value if result.valid else None


__all__ = [
    "FilterMode",
    "FilterResult",
    "FilteredValue",
    "Filters",
    "filter_bool",
    "filter_int",
    "filter_int_or_bool",
    "filter_octal_mod",
    "filter_string",
]
