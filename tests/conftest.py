# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from io import StringIO
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console

from wpstarter.io import Io
from wpstarter.locator import Locator


def io_output(io: Io) -> str:
    """Return everything written to the in-memory console of ``io``."""

    file = io.console.file
    assert isinstance(file, StringIO)
    return file.getvalue()


@pytest.fixture
def io() -> Io:
    console = Console(file=StringIO(), force_terminal=False, no_color=True, width=200)
    return Io(console=console, use_emoji=False)


def write_installed(root: Path, packages: list[Mapping[str, Any]]) -> None:
    installed = root / "vendor" / "composer" / "installed.json"
    installed.parent.mkdir(parents=True, exist_ok=True)
    installed.write_text(json.dumps({"packages": list(packages)}), encoding="utf-8")


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Create a minimal project with WordPress 6.4.2 installed through Composer."""

    root = tmp_path / "project"
    root.mkdir()
    (root / "composer.json").write_text(json.dumps({"name": "acme/site", "extra": {}}), encoding="utf-8")
    (root / "vendor").mkdir()
    (root / "vendor" / "autoload.php").write_text("<?php\n", encoding="utf-8")
    (root / "wordpress").mkdir()
    (root / "wordpress" / "wp-settings.php").write_text("<?php\n", encoding="utf-8")
    write_installed(
        root,
        [
            {
                "name": "roots/wordpress-no-content",
                "version": "6.4.2",
                "version_normalized": "6.4.2.0",
                "type": "wordpress-core",
                "install-path": "../../wordpress",
            }
        ],
    )
    return root


@pytest.fixture
def make_locator(io: Io) -> Callable[..., Locator]:
    def _make(root: Path, *, env: Mapping[str, str] | None = None) -> Locator:
        return Locator.from_root(root, io, env=env or {})

    return _make
