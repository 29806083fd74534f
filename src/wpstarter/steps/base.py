# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Contract shared by every scaffolding step."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, TypeAlias, runtime_checkable

from ..config import Config
from ..paths import Paths

if TYPE_CHECKING:
    from ..locator import Locator


class StepResult(StrEnum):
    """Outcome reported by a step."""

    SUCCESS = "success"
    SKIPPED = "skipped"
    ERROR = "error"


@runtime_checkable
class Step(Protocol):
    """A named, runnable scaffolding unit."""

    name: str

    def run(self, config: Config, paths: Paths) -> StepResult:
        """Apply the step to the project described by ``paths``."""

        raise NotImplementedError


StepConstructor: TypeAlias = Callable[["Locator"], Step]
StepReference: TypeAlias = str | StepConstructor


class BaseStep(ABC):
    """Convenience base class for steps built on a :class:`Locator`.

    Blocking steps abort the remaining pipeline when they fail; non-blocking
    ones only mark the run as failed.
    """

    name: ClassVar[str] = ""
    blocking: ClassVar[bool] = True

    def __init__(self, locator: Locator) -> None:
        self._locator = locator
        self.error_message = ""
        self.success_message = ""

    def allowed(self, config: Config, paths: Paths) -> bool:
        del config, paths
        return True

    @abstractmethod
    def run(self, config: Config, paths: Paths) -> StepResult:
        raise NotImplementedError

    def _error(self, message: str) -> StepResult:
        self.error_message = message
        return StepResult.ERROR

    def _success(self, message: str) -> StepResult:
        self.success_message = message
        return StepResult.SUCCESS


class NullStep:
    """Placeholder for references that do not resolve to a step; never cataloged."""

    name = ""
    blocking = False

    def run(self, config: Config, paths: Paths) -> StepResult:
        del config, paths
        return StepResult.SKIPPED


def write_if_changed(path: Path, content: str) -> bool:
    """Write ``content`` to ``path`` unless it already holds exactly that content."""

    if path.is_file() and path.read_text(encoding="utf-8") == content:
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return True


__all__ = [
    "BaseStep",
    "NullStep",
    "Step",
    "StepConstructor",
    "StepReference",
    "StepResult",
    "write_if_changed",
]
