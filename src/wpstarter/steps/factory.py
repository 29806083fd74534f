# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Turn step references into step instances."""

from __future__ import annotations

import importlib
from collections.abc import Iterable
from importlib import metadata
from typing import TYPE_CHECKING, Final, cast

from .base import NullStep, Step, StepConstructor, StepReference
from .builtin import WpCliCommandsStep
from .runner import Steps

if TYPE_CHECKING:
    from ..io import Io
    from ..locator import Locator

STEP_ENTRY_POINT_GROUP: Final[str] = "wpstarter.steps"


def _load_entry_point(name: str) -> StepConstructor | None:
    for entry in metadata.entry_points(group=STEP_ENTRY_POINT_GROUP):
        if entry.name != name:
            continue
        try:
            loaded = entry.load()
        except Exception:  # noqa: BLE001
            return None
        return cast(StepConstructor, loaded) if callable(loaded) else None
    return None


def resolve_reference(reference: object) -> StepConstructor | None:
    """Return the constructor ``reference`` points to, or ``None``.

    A reference is a callable, a dotted import path (``pkg.module.Step`` or
    ``pkg.module:Step``) or the name of a ``wpstarter.steps`` entry point.
    """

    if callable(reference):
        return cast(StepConstructor, reference)
    if not isinstance(reference, str) or not reference.strip():
        return None
    path = reference.strip()
    if ":" in path:
        module_path, _, attribute = path.partition(":")
    elif "." in path:
        module_path, _, attribute = path.rpartition(".")
    else:
        return _load_entry_point(path)
    if not module_path or not attribute:
        return None
    try:
        module = importlib.import_module(module_path)
    except Exception:  # noqa: BLE001
        return None
    candidate = getattr(module, attribute, None)
    return cast(StepConstructor, candidate) if callable(candidate) else None


class StepFactory:
    """Instantiate steps, replacing unusable references with :class:`NullStep`."""

    def __init__(self, locator: Locator) -> None:
        self._locator = locator

    @property
    def io(self) -> Io:
        return self._locator.io

    def create(self, reference: StepReference) -> Step:
        constructor = resolve_reference(reference)
        if constructor is None:
            self._locator.io.warn(f"Step '{reference}' can't be resolved, it will be ignored.")
            return NullStep()
        try:
            step = constructor(self._locator)
        except Exception as exc:  # noqa: BLE001
            self._locator.io.warn(f"Step '{reference}' could not be created ({exc}), it will be ignored.")
            return NullStep()
        if not isinstance(step, Step):
            self._locator.io.warn(f"'{reference}' does not provide a valid step, it will be ignored.")
            return NullStep()
        return step


def factory_steps(
    factory: StepFactory,
    steps: Steps,
    selected: Iterable[tuple[str, StepReference]],
) -> bool:
    """Instantiate ``selected`` entries into ``steps``.

    A step is kept only when the name it reports equals its catalog name, and
    each name is added once.

    Returns:
        bool: ``True`` when the WP-CLI commands step is part of ``steps``.
    """

    for name, reference in selected:
        if not name or name in steps:
            continue
        step = factory.create(reference)
        if step.name != name:
            if not isinstance(step, NullStep):
                factory.io.warn(f"Step '{step.name}' declared as '{name}' will be ignored.")
            continue
        steps.add_step(step)
    return WpCliCommandsStep.name in steps


__all__ = ["STEP_ENTRY_POINT_GROUP", "StepFactory", "factory_steps", "resolve_reference"]
