# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Orchestrate a full starter run: version check, catalog, WP-CLI, pipeline."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any

from .config import keys
from .errors import InterpreterNotFoundError, NoSupportedWordPressError
from .io import Io
from .locator import Locator
from .packages import WpVersion
from .steps import (
    BUILTIN_STEPS,
    PipelineOutcome,
    StepFactory,
    StepReference,
    Steps,
    WpCliCommandsStep,
    build_catalog,
    factory_steps,
    select_steps,
)
from .wp_cli import ExecutorFactory, WpCliTool, find_php

PhpFinder = Callable[[Mapping[str, str]], Path | None]


class WpStarter:
    """Run the configured steps against one project.

    Errors are raised, never turned into process exits: the CLI decides the
    exit code.
    """

    def __init__(
        self,
        locator: Locator,
        *,
        builtin_steps: Mapping[str, StepReference] = BUILTIN_STEPS,
        php_finder: PhpFinder = find_php,
    ) -> None:
        self._locator = locator
        self._builtin_steps = builtin_steps
        self._php_finder = php_finder

    @classmethod
    def from_root(cls, root: Path, io: Io, *, env: Mapping[str, str] | None = None) -> WpStarter:
        return cls(Locator.from_root(root, io, env=env))

    @property
    def locator(self) -> Locator:
        return self._locator

    def catalog(self, selected_steps: Iterable[object] = ()) -> list[tuple[str, StepReference]]:
        """Return the ``(name, reference)`` pairs that would be instantiated, in order."""

        config = self._locator.config
        custom = self._config_steps(keys.CUSTOM_STEPS, {})
        skipped = self._config_steps(keys.SKIP_STEPS, [])
        merged: dict[str, StepReference] = {**self._builtin_steps, **custom}
        if config[keys.WP_CLI_COMMANDS].not_empty() and WpCliCommandsStep.name not in merged:
            merged[WpCliCommandsStep.name] = WpCliCommandsStep
        return select_steps(build_catalog(merged, {}, skipped), selected_steps)

    def run(self, selected_steps: Iterable[object] = ()) -> PipelineOutcome:
        """Run the pipeline, optionally restricted to ``selected_steps``.

        Raises:
            NoSupportedWordPressError: When WordPress is required but not found.
            InterpreterNotFoundError: When WP-CLI is needed but PHP is missing.
            StepFailedError: When a blocking step fails.
        """

        locator = self._locator
        self._check_wp_version()
        steps = Steps(locator.io)
        has_wp_cli = factory_steps(StepFactory(locator), steps, self.catalog(selected_steps))
        if has_wp_cli:
            self._bind_wp_cli_executor()
        locator.io.logo()
        return steps.run(locator.config, locator.paths)

    def _check_wp_version(self) -> None:
        config = self._locator.config
        if config[keys.REQUIRE_WP].is_(False):
            return
        version = WpVersion(self._locator.packages, self._locator.io).discover()
        if not version:
            raise NoSupportedWordPressError()
        if not config[keys.WP_VERSION].not_empty():
            config.append_config(keys.WP_VERSION, version)

    def _bind_wp_cli_executor(self) -> None:
        locator = self._locator
        php = self._php_finder(locator.env)
        if php is None:
            raise InterpreterNotFoundError()
        tool = WpCliTool.from_config(locator.config)
        executor = ExecutorFactory(locator).create(tool, php)
        if executor is None:
            locator.io.fail(f"{tool.nice_name} is not available, its commands will fail.")
            return
        locator.config.append_config(keys.WP_CLI_EXECUTOR, executor)

    def _config_steps(self, key: str, default: Any) -> Any:
        value = self._locator.config[key]
        if value.is_errored():
            self._locator.io.warn(value.error or f"Invalid '{key}' configuration.")
        return value.unwrap_or_fallback(default)


__all__ = ["WpStarter"]
