# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy surfaced at the run boundary."""

from __future__ import annotations


class WpStarterError(RuntimeError):
    """Base error raised when a run fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class ConfigError(WpStarterError):
    """Raised when a configuration source is malformed or mutated illegally."""


class FatalError(WpStarterError):
    """Raised for failures that abort the run before any step executes."""


class NoSupportedWordPressError(FatalError):
    def __init__(self) -> None:
        super().__init__("No supported WordPress version found.")


class InterpreterNotFoundError(FatalError):
    def __init__(self) -> None:
        super().__init__("PHP executable not found.")


class StepFailedError(WpStarterError):
    """Raised when a blocking step reports an unrecoverable error."""

    def __init__(self, step_name: str, message: str) -> None:
        super().__init__(message)
        self.step_name = step_name


__all__ = [
    "ConfigError",
    "FatalError",
    "InterpreterNotFoundError",
    "NoSupportedWordPressError",
    "StepFailedError",
    "WpStarterError",
]
