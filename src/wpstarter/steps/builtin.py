# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Steps shipped with the starter."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from ..config import Config, keys
from ..paths import Paths
from .base import BaseStep, StepReference, StepResult, write_if_changed

MU_LOADER_FILE: Final[str] = "wpstarter-mu-loader.php"


def _relative(target: Path, start: Path) -> str:
    return Path(os.path.relpath(target, start)).as_posix()


class CheckPathStep(BaseStep):
    """Verify Composer and WordPress are where the other steps expect them."""

    name = "check-paths"

    def run(self, config: Config, paths: Paths) -> StepResult:
        if not paths.vendor("autoload.php").is_file():
            return self._error(f"Composer autoload file not found in {paths.vendor()}.")
        if config[keys.REQUIRE_WP].is_not(False) and not paths.wp("wp-settings.php").is_file():
            return self._error(f"WordPress not found in {paths.wp()}.")
        content_dir = paths.wp_content()
        if content_dir.exists() and not content_dir.is_dir():
            return self._error(f"{content_dir} exists but is not a directory.")
        content_dir.mkdir(parents=True, exist_ok=True)
        return self._success("All paths recognized as valid.")


class IndexStep(BaseStep):
    """Write the web root ``index.php`` that boots WordPress from its own folder."""

    name = "index"

    def allowed(self, config: Config, paths: Paths) -> bool:
        return paths.wp() != paths.root() and config[keys.REQUIRE_WP].is_not(False)

    def run(self, config: Config, paths: Paths) -> StepResult:
        target = paths.wp_parent("index.php")
        relative = _relative(paths.wp(), paths.wp_parent())
        content = (
            "<?php\n"
            "define('WP_USE_THEMES', true);\n"
            f"require __DIR__ . '/{relative}/wp-blog-header.php';\n"
        )
        if not write_if_changed(target, content):
            return StepResult.SKIPPED
        return self._success(f"{target.name} saved successfully.")


class MuLoaderStep(BaseStep):
    """Write a loader so WordPress loads MU plugins living in sub-folders."""

    name = "mu-loader"

    def run(self, config: Config, paths: Paths) -> StepResult:
        entries = self._locator.mu_plugins().plugins_list()
        if not entries:
            return StepResult.SKIPPED
        loader_dir = paths.wp_content("mu-plugins")
        lines = ["<?php", "// Generated by WP Starter. Do not edit.", ""]
        for key, file in sorted(entries.items()):
            lines.append(f"// {key}")
            lines.append(f"require_once __DIR__ . '/{_relative(file, loader_dir)}';")
        if not write_if_changed(loader_dir / MU_LOADER_FILE, "\n".join(lines) + "\n"):
            return StepResult.SKIPPED
        return self._success(f"MU plugins loader saved with {len(entries)} plugin(s).")


class WpCliConfigStep(BaseStep):
    """Create ``wp-cli.yml`` pointing WP-CLI to the WordPress folder."""

    name = "wp-cli-config"

    def run(self, config: Config, paths: Paths) -> StepResult:
        target = paths.root("wp-cli.yml")
        # An existing file belongs to the user.
        if target.exists():
            return StepResult.SKIPPED
        target.write_text(f"path: {_relative(paths.wp(), paths.root())}\n", encoding="utf-8")
        return self._success("wp-cli.yml saved successfully.")


class WpCliCommandsStep(BaseStep):
    """Run the configured WP-CLI commands through the executor bound to the config."""

    name = "wp-cli"
    blocking = False

    def allowed(self, config: Config, paths: Paths) -> bool:
        return config[keys.WP_CLI_COMMANDS].not_empty()

    def run(self, config: Config, paths: Paths) -> StepResult:
        commands: list[str] = config[keys.WP_CLI_COMMANDS].unwrap_or_fallback([])
        if not commands:
            return StepResult.SKIPPED
        executor = config[keys.WP_CLI_EXECUTOR].unwrap_or_fallback(None)
        if executor is None:
            return self._error("WP CLI is not available, commands can't be run.")

        io = self._locator.io
        failed: list[str] = []
        for command in commands:
            io.info(f"Running: wp {command.removeprefix('wp ').strip()}")
            if not executor.run(command):
                failed.append(command)
        if failed:
            return self._error(f"{len(failed)} WP CLI command(s) failed: {'; '.join(failed)}")
        return self._success(f"{len(commands)} WP CLI command(s) executed successfully.")


BUILTIN_STEPS: Final[Mapping[str, StepReference]] = {
    CheckPathStep.name: CheckPathStep,
    IndexStep.name: IndexStep,
    MuLoaderStep.name: MuLoaderStep,
    WpCliConfigStep.name: WpCliConfigStep,
}

__all__ = [
    "BUILTIN_STEPS",
    "CheckPathStep",
    "IndexStep",
    "MuLoaderStep",
    "WpCliCommandsStep",
    "WpCliConfigStep",
]
