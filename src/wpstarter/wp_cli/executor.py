# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate or acquire WP-CLI and run its commands in a child process."""

from __future__ import annotations

import shlex
import shutil
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from packaging.version import InvalidVersion, Version

from ..config import keys
from ..io import Io
from ..locator import Locator
from ..paths import Paths
from ..process_utils import run_command
from .integrity import PharVerifier
from .tool import WpCliTool

PHP_BINARY_ENV: Final[str] = "PHP_BINARY"
NOT_FOUND_EXIT_CODE: Final[int] = 127
DEFAULT_TIMEOUT: Final[float] = 600.0


def find_php(env: Mapping[str, str]) -> Path | None:
    """Return the PHP interpreter, honouring the ``PHP_BINARY`` override."""

    override = env.get(PHP_BINARY_ENV)
    if override:
        candidate = Path(shutil.which(override) or override)
        if candidate.is_file():
            return candidate
    found = shutil.which("php")
    return Path(found) if found else None


@dataclass(frozen=True, slots=True)
class ProcessResult:
    exit_code: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class PhpToolExecutor:
    """Run WP-CLI subcommands through ``php <target>``."""

    def __init__(
        self,
        php: Path,
        target: Path,
        *,
        tool: WpCliTool,
        paths: Paths,
        io: Io,
        env: Mapping[str, str],
        timeout: float | None = DEFAULT_TIMEOUT,
    ) -> None:
        self.php = php
        self.target = target
        self._tool = tool
        self._paths = paths
        self._io = io
        self._env = {**env, **tool.process_env(paths, env)}
        self._timeout = timeout

    @property
    def env(self) -> dict[str, str]:
        return dict(self._env)

    def command(self, args: str | Sequence[str]) -> list[str]:
        """Return the full argument list for ``args``.

        A string is split shell-style; a leading ``wp`` is dropped so config can
        list commands exactly as typed in a terminal.
        """

        parts = shlex.split(args) if isinstance(args, str) else list(args)
        if parts and parts[0] == "wp":
            parts = parts[1:]
        return [str(self.php), str(self.target), *parts]

    def execute(self, args: str | Sequence[str]) -> ProcessResult:
        cmd = self.command(args)
        self._io.debug(f"command={shlex.join(cmd)}")
        try:
            completed = run_command(
                cmd,
                cwd=self._paths.root(),
                env=self._env,
                timeout=self._timeout,
                discard_stdin=True,
            )
        except OSError as exc:
            return ProcessResult(NOT_FOUND_EXIT_CODE, "", str(exc))
        return ProcessResult(completed.returncode, completed.stdout or "", completed.stderr or "")

    def run(self, args: str | Sequence[str]) -> bool:
        """Execute ``args`` and echo the output of the child process."""

        result = self.execute(args)
        if result.stdout.strip():
            self._io.echo(result.stdout.rstrip())
        if result.stderr.strip():
            self._io.warn(result.stderr.rstrip())
        return result.ok


class ExecutorFactory:
    """Build a :class:`PhpToolExecutor` from the best available WP-CLI source.

    Sources are tried in order: the ``wp-cli/wp-cli`` Composer package, a phar
    already present in the project root, a freshly downloaded and verified phar.
    """

    def __init__(self, locator: Locator) -> None:
        self._locator = locator

    def create(self, tool: WpCliTool, php: Path) -> PhpToolExecutor | None:
        target = self._installed_bootstrap(tool) or tool.phar_target(self._locator.paths) or self._download(tool)
        if target is None:
            return None
        self._locator.io.debug(f"wp-cli target={target}")
        return PhpToolExecutor(
            php,
            target,
            tool=tool,
            paths=self._locator.paths,
            io=self._locator.io,
            env=self._locator.env,
            timeout=self._locator.config[keys.WP_CLI_TIMEOUT].unwrap_or_fallback(DEFAULT_TIMEOUT),
        )

    def _installed_bootstrap(self, tool: WpCliTool) -> Path | None:
        finder = self._locator.packages
        package = finder.find_by_name(tool.package_name)
        if package is None or not package.version:
            return None
        try:
            if Version(package.version) < Version(tool.min_version):
                return None
        except InvalidVersion:
            return None
        package_dir = finder.find_path_of(package)
        if package_dir is None:
            return None
        bootstrap = tool.filesystem_bootstrap(package_dir)
        return bootstrap if bootstrap.is_file() else None

    def _download(self, tool: WpCliTool) -> Path | None:
        io = self._locator.io
        url = tool.phar_url
        if not url:
            return None
        target = tool.download_target(self._locator.paths)
        io.info(f"Downloading {tool.nice_name} phar from {url}")
        downloader = self._locator.downloader
        if not downloader.save(url, target):
            io.fail(f"Failed to download {tool.nice_name} phar.")
            io.fail(downloader.error)
            return None
        result = PharVerifier(tool, downloader, io).verify(target)
        if not result.ok:
            target.unlink(missing_ok=True)
            return None
        io.ok(f"{tool.nice_name} phar downloaded and verified ({result.algorithm}).")
        return target


__all__ = ["ExecutorFactory", "PhpToolExecutor", "ProcessResult", "find_php"]
