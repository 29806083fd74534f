# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the steps shipped with the starter."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

from conftest import write_installed

from wpstarter.config import keys
from wpstarter.locator import Locator
from wpstarter.steps import (
    CheckPathStep,
    IndexStep,
    MuLoaderStep,
    StepResult,
    WpCliCommandsStep,
    WpCliConfigStep,
)


class FakeExecutor:
    def __init__(self, failing: set[str] | None = None) -> None:
        self.failing = failing or set()
        self.ran: list[str] = []

    def run(self, command: str) -> bool:
        self.ran.append(command)
        return command not in self.failing


def test_check_paths_creates_content_dir(project: Path, make_locator: Callable[..., Locator]) -> None:
    locator = make_locator(project)
    step = CheckPathStep(locator)

    assert step.run(locator.config, locator.paths) is StepResult.SUCCESS
    assert (project / "wp-content").is_dir()


def test_check_paths_requires_autoload(project: Path, make_locator: Callable[..., Locator]) -> None:
    (project / "vendor" / "autoload.php").unlink()
    locator = make_locator(project)
    step = CheckPathStep(locator)

    assert step.run(locator.config, locator.paths) is StepResult.ERROR
    assert "autoload" in step.error_message


def test_check_paths_requires_wordpress_unless_disabled(project: Path, make_locator: Callable[..., Locator]) -> None:
    (project / "wordpress" / "wp-settings.php").unlink()
    locator = make_locator(project)

    assert CheckPathStep(locator).run(locator.config, locator.paths) is StepResult.ERROR

    (project / "wpstarter.json").write_text(json.dumps({"require-wp": False}), encoding="utf-8")
    locator = make_locator(project)

    assert CheckPathStep(locator).run(locator.config, locator.paths) is StepResult.SUCCESS


def test_index_points_to_wordpress_folder(project: Path, make_locator: Callable[..., Locator]) -> None:
    locator = make_locator(project)
    step = IndexStep(locator)

    assert step.allowed(locator.config, locator.paths)
    assert step.run(locator.config, locator.paths) is StepResult.SUCCESS
    content = (project / "index.php").read_text(encoding="utf-8")
    assert "require __DIR__ . '/wordpress/wp-blog-header.php';" in content
    assert step.run(locator.config, locator.paths) is StepResult.SKIPPED


def test_index_not_allowed_when_wordpress_is_the_root(project: Path, make_locator: Callable[..., Locator]) -> None:
    composer = {"extra": {"wordpress-install-dir": "."}}
    (project / "composer.json").write_text(json.dumps(composer), encoding="utf-8")
    locator = make_locator(project)

    assert not IndexStep(locator).allowed(locator.config, locator.paths)


def test_mu_loader_requires_plugin_files(project: Path, make_locator: Callable[..., Locator]) -> None:
    package_dir = project / "vendor" / "acme" / "mu"
    package_dir.mkdir(parents=True)
    (package_dir / "mu.php").write_text("<?php\n", encoding="utf-8")
    write_installed(project, [{"name": "acme/mu", "type": "wordpress-muplugin"}])
    locator = make_locator(project)
    step = MuLoaderStep(locator)

    assert step.run(locator.config, locator.paths) is StepResult.SUCCESS
    loader = (project / "wp-content" / "mu-plugins" / "wpstarter-mu-loader.php").read_text(encoding="utf-8")
    assert "require_once __DIR__ . '/../../vendor/acme/mu/mu.php';" in loader
    assert step.run(locator.config, locator.paths) is StepResult.SKIPPED


def test_mu_loader_skips_without_mu_plugins(project: Path, make_locator: Callable[..., Locator]) -> None:
    locator = make_locator(project)

    assert MuLoaderStep(locator).run(locator.config, locator.paths) is StepResult.SKIPPED


def test_wp_cli_config_keeps_existing_file(project: Path, make_locator: Callable[..., Locator]) -> None:
    locator = make_locator(project)
    step = WpCliConfigStep(locator)

    assert step.run(locator.config, locator.paths) is StepResult.SUCCESS
    assert (project / "wp-cli.yml").read_text(encoding="utf-8") == "path: wordpress\n"
    (project / "wp-cli.yml").write_text("path: custom\n", encoding="utf-8")
    assert step.run(locator.config, locator.paths) is StepResult.SKIPPED
    assert (project / "wp-cli.yml").read_text(encoding="utf-8") == "path: custom\n"


def test_wp_cli_commands_step_is_non_blocking() -> None:
    assert WpCliCommandsStep.blocking is False
    assert CheckPathStep.blocking is True


def test_wp_cli_commands_need_an_executor(project: Path, make_locator: Callable[..., Locator]) -> None:
    (project / "wpstarter.json").write_text(json.dumps({"wp-cli-commands": ["core version"]}), encoding="utf-8")
    locator = make_locator(project)
    step = WpCliCommandsStep(locator)

    assert step.allowed(locator.config, locator.paths)
    assert step.run(locator.config, locator.paths) is StepResult.ERROR
    assert step.error_message == "WP CLI is not available, commands can't be run."


def test_wp_cli_commands_run_every_command(project: Path, make_locator: Callable[..., Locator]) -> None:
    commands = ["wp core version", "plugin list", "option get home"]
    (project / "wpstarter.json").write_text(json.dumps({"wp-cli-commands": commands}), encoding="utf-8")
    locator = make_locator(project)
    executor = FakeExecutor(failing={"plugin list"})
    locator.config.append_config(keys.WP_CLI_EXECUTOR, executor)
    step = WpCliCommandsStep(locator)

    assert step.run(locator.config, locator.paths) is StepResult.ERROR
    assert executor.ran == commands
    assert "plugin list" in step.error_message


def test_wp_cli_commands_not_allowed_without_commands(project: Path, make_locator: Callable[..., Locator]) -> None:
    locator = make_locator(project)

    assert not WpCliCommandsStep(locator).allowed(locator.config, locator.paths)
