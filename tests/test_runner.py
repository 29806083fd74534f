# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for sequential step execution."""

from __future__ import annotations

from pathlib import Path

import pytest
from conftest import io_output

from wpstarter.config import Config
from wpstarter.errors import StepFailedError
from wpstarter.io import Io
from wpstarter.paths import Paths
from wpstarter.steps import StepResult, Steps


class RecordingStep:
    def __init__(
        self,
        name: str,
        result: StepResult,
        calls: list[str],
        *,
        blocking: bool = True,
        allowed: bool = True,
    ) -> None:
        self.name = name
        self.blocking = blocking
        self.error_message = f"{name} broke"
        self.success_message = f"{name} done"
        self._result = result
        self._calls = calls
        self._allowed = allowed

    def allowed(self, config: Config, paths: Paths) -> bool:
        return self._allowed

    def run(self, config: Config, paths: Paths) -> StepResult:
        self._calls.append(self.name)
        return self._result


class ExplodingStep:
    name = "explode"

    def __init__(self, *, blocking: bool) -> None:
        self.blocking = blocking

    def run(self, config: Config, paths: Paths) -> StepResult:
        raise ValueError("boom")


@pytest.fixture
def paths(tmp_path: Path) -> Paths:
    return Paths.from_composer(tmp_path, {})


@pytest.fixture
def config(tmp_path: Path) -> Config:
    return Config({}, root=tmp_path)


def test_steps_names_are_unique(io: Io) -> None:
    calls: list[str] = []
    steps = Steps(io)

    assert steps.add_step(RecordingStep("a", StepResult.SUCCESS, calls))
    assert not steps.add_step(RecordingStep("a", StepResult.ERROR, calls))
    assert not steps.add_step(RecordingStep("", StepResult.SUCCESS, calls))
    assert steps.names() == ["a"]
    assert len(steps) == 1


def test_all_steps_run_in_order(io: Io, config: Config, paths: Paths) -> None:
    calls: list[str] = []
    steps = Steps(io)
    for name in ("a", "b", "c"):
        steps.add_step(RecordingStep(name, StepResult.SUCCESS, calls))

    outcome = steps.run(config, paths)

    assert calls == ["a", "b", "c"]
    assert outcome.ok
    assert outcome.succeeded == ["a", "b", "c"]
    assert "WP Starter finished successfully!" in io_output(io)


def test_blocking_failure_aborts_remaining_steps(io: Io, config: Config, paths: Paths) -> None:
    calls: list[str] = []
    steps = Steps(io)
    steps.add_step(RecordingStep("a", StepResult.SUCCESS, calls))
    steps.add_step(RecordingStep("b", StepResult.ERROR, calls))
    steps.add_step(RecordingStep("c", StepResult.SUCCESS, calls))

    with pytest.raises(StepFailedError) as excinfo:
        steps.run(config, paths)

    assert calls == ["a", "b"]
    assert excinfo.value.step_name == "b"
    assert str(excinfo.value) == "b broke"
    assert "aborted" in io_output(io)


def test_non_blocking_failure_continues(io: Io, config: Config, paths: Paths) -> None:
    calls: list[str] = []
    steps = Steps(io)
    steps.add_step(RecordingStep("a", StepResult.ERROR, calls, blocking=False))
    steps.add_step(RecordingStep("b", StepResult.SUCCESS, calls))

    outcome = steps.run(config, paths)

    assert calls == ["a", "b"]
    assert not outcome.ok
    assert outcome.failed == ["a"]
    assert "finished with errors in: a" in io_output(io)


def test_step_not_allowed_is_skipped_without_running(io: Io, config: Config, paths: Paths) -> None:
    calls: list[str] = []
    steps = Steps(io)
    steps.add_step(RecordingStep("a", StepResult.SUCCESS, calls, allowed=False))

    outcome = steps.run(config, paths)

    assert calls == []
    assert outcome.skipped == ["a"]
    assert outcome.ok


def test_raising_non_blocking_step_is_reported_as_error(io: Io, config: Config, paths: Paths) -> None:
    steps = Steps(io)
    steps.add_step(ExplodingStep(blocking=False))

    outcome = steps.run(config, paths)

    assert outcome.failed == ["explode"]
    assert "raised ValueError: boom" in io_output(io)


def test_raising_blocking_step_aborts(io: Io, config: Config, paths: Paths) -> None:
    steps = Steps(io)
    steps.add_step(ExplodingStep(blocking=True))

    with pytest.raises(StepFailedError, match="boom"):
        steps.run(config, paths)
