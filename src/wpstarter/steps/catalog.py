# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build the ordered list of steps to run."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from .base import StepConstructor, StepReference
from .factory import resolve_reference


def _is_skipped(
    name: str,
    reference: StepReference,
    skip: list[StepReference],
    skip_constructors: list[StepConstructor],
) -> bool:
    if name in skip or reference in skip:
        return True
    if not skip_constructors:
        return False
    constructor = resolve_reference(reference)
    return constructor is not None and any(constructor is skipped for skipped in skip_constructors)


def build_catalog(
    builtin: Mapping[str, StepReference],
    custom: Mapping[str, StepReference],
    skipped: Iterable[StepReference],
) -> dict[str, StepReference]:
    """Merge built-in and custom steps, then drop skipped ones.

    A custom step sharing a name with a built-in one replaces it in place, so
    built-in order is kept. An entry is skipped when its name, its reference or
    the constructor its reference resolves to appears in ``skipped``; hence
    ``pkg.mod.Step``, ``pkg.mod:Step`` and the ``Step`` class itself all skip
    the same entry.

    Args:
        builtin: Built-in steps in declaration order.
        custom: Steps declared in configuration.
        skipped: Names or references to remove.

    Returns:
        dict[str, StepReference]: Ordered catalog keyed by step name.
    """

    skip = list(skipped)
    skip_constructors = [ctor for ctor in map(resolve_reference, skip) if ctor is not None]
    merged: dict[str, StepReference] = {**builtin, **custom}
    return {
        name: reference
        for name, reference in merged.items()
        if name and not _is_skipped(name, reference, skip, skip_constructors)
    }


def select_steps(
    catalog: Mapping[str, StepReference],
    selected: Iterable[object] = (),
) -> list[tuple[str, StepReference]]:
    """Return catalog entries restricted to ``selected`` names, in catalog order.

    Non-string selections are ignored; unknown names select nothing.
    """

    wanted = {name for name in selected if isinstance(name, str) and name}
    ordered: list[tuple[str, StepReference]] = []
    seen: set[str] = set()
    for name, reference in catalog.items():
        if not name or name in seen or (wanted and name not in wanted):
            continue
        seen.add(name)
        ordered.append((name, reference))
    return ordered


__all__ = ["build_catalog", "select_steps"]
