# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run child processes for a single command line, never raising on exit status."""

from __future__ import annotations

import shutil

# Bandit: commands are argument lists without ``shell=True``.
import subprocess  # nosec B404
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Final

TIMEOUT_EXIT_CODE: Final[int] = 124


def _resolve_executable(args: Sequence[str]) -> list[str]:
    if not args:
        raise ValueError("a command needs at least the executable")
    executable, *rest = args
    if Path(executable).is_absolute():
        return [executable, *rest]
    found = shutil.which(executable)
    if found is None:
        raise FileNotFoundError(f"Executable '{executable}' was not found on PATH")
    return [found, *rest]


def _text(value: str | bytes | None) -> str:
    if isinstance(value, bytes):
        return value.decode(errors="replace")
    return value or ""


def run_command(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
    timeout: float | None = None,
    discard_stdin: bool = False,
) -> subprocess.CompletedProcess[str]:
    """Run ``args`` and capture its output as text.

    The exit status is reported, not raised. A timeout kills the child and
    yields exit code ``124`` with a note appended to ``stderr``.

    Raises:
        FileNotFoundError: When a relative executable is not on ``PATH``.
    """

    command = _resolve_executable(args)
    try:
        # Bandit: the command comes from project configuration as an argument list.
        return subprocess.run(  # nosec B603
            command,
            cwd=str(cwd) if cwd is not None else None,
            env=dict(env) if env is not None else None,
            check=False,
            capture_output=True,
            text=True,
            timeout=timeout,
            stdin=subprocess.DEVNULL if discard_stdin else None,
        )
    except subprocess.TimeoutExpired as exc:
        note = f"Command timed out after {timeout:.1f}s" if timeout is not None else "Command timed out"
        stderr = _text(exc.stderr)
        return subprocess.CompletedProcess(
            args=command,
            returncode=TIMEOUT_EXIT_CODE,
            stdout=_text(exc.stdout),
            stderr=f"{stderr}\n{note}" if stderr else note,
        )


__all__ = ["TIMEOUT_EXIT_CODE", "run_command"]
