# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Sequential execution of the step pipeline."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from ..config import Config
from ..errors import StepFailedError
from ..io import Io
from ..paths import Paths
from .base import Step, StepResult


@dataclass(frozen=True, slots=True)
class StepReport:
    name: str
    result: StepResult
    message: str = ""


@dataclass(slots=True)
class PipelineOutcome:
    """Per-step results of a pipeline run."""

    reports: list[StepReport] = field(default_factory=list)
    aborted: bool = False

    def names(self, result: StepResult) -> list[str]:
        return [report.name for report in self.reports if report.result is result]

    @property
    def succeeded(self) -> list[str]:
        return self.names(StepResult.SUCCESS)

    @property
    def skipped(self) -> list[str]:
        return self.names(StepResult.SKIPPED)

    @property
    def failed(self) -> list[str]:
        return self.names(StepResult.ERROR)

    @property
    def ok(self) -> bool:
        return not self.aborted and not self.failed


class Steps:
    """Ordered, name-unique collection of steps run one after the other.

    The runner holds no state between runs and never rolls back: a re-run starts
    from the first step and relies on steps being idempotent.
    """

    def __init__(self, io: Io) -> None:
        self._io = io
        self._steps: dict[str, Step] = {}

    def add_step(self, step: Step) -> bool:
        if not step.name or step.name in self._steps:
            return False
        self._steps[step.name] = step
        return True

    def names(self) -> list[str]:
        return list(self._steps)

    def __contains__(self, name: object) -> bool:
        return name in self._steps

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps.values())

    def __len__(self) -> int:
        return len(self._steps)

    def run(self, config: Config, paths: Paths) -> PipelineOutcome:
        """Run every step in order.

        Returns:
            PipelineOutcome: Results of all executed steps.

        Raises:
            StepFailedError: When a blocking step fails; later steps are not run.
        """

        outcome = PipelineOutcome()
        for step in self:
            report = self._run_step(step, config, paths)
            outcome.reports.append(report)
            if report.result is StepResult.ERROR and getattr(step, "blocking", True):
                outcome.aborted = True
                self._io.fail("WP Starter aborted, remaining steps not executed.")
                raise StepFailedError(step.name, report.message)

        if outcome.failed:
            self._io.fail(f"WP Starter finished with errors in: {', '.join(outcome.failed)}.")
        else:
            self._io.ok("WP Starter finished successfully!")
        return outcome

    def _run_step(self, step: Step, config: Config, paths: Paths) -> StepReport:
        allowed = getattr(step, "allowed", None)
        if callable(allowed) and not allowed(config, paths):
            self._io.debug(f"step={step.name} result=not-allowed")
            return StepReport(step.name, StepResult.SKIPPED)

        self._io.section(step.name)
        try:
            result = StepResult(step.run(config, paths))
        except Exception as exc:  # noqa: BLE001
            message = f"Step '{step.name}' raised {type(exc).__name__}: {exc}"
            self._io.fail(message)
            return StepReport(step.name, StepResult.ERROR, message)

        if result is StepResult.ERROR:
            message = getattr(step, "error_message", "") or f"Step '{step.name}' failed."
            self._io.fail(message)
            return StepReport(step.name, result, message)
        if result is StepResult.SUCCESS:
            message = getattr(step, "success_message", "")
            if message:
                self._io.ok(message)
            return StepReport(step.name, result, message)
        self._io.debug(f"step={step.name} result=skipped")
        return StepReport(step.name, result)


__all__ = ["PipelineOutcome", "StepReport", "Steps"]
