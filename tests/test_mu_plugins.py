# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for MU plugin entry file discovery."""

from __future__ import annotations

from pathlib import Path

from conftest import write_installed

from wpstarter.mu_plugins import HEADER_BYTES, MuPluginList, is_plugin_file
from wpstarter.packages import PackageFinder
from wpstarter.paths import Paths

HEADER = "<?php\n/**\n * Plugin Name: {name}\n */\n"


def _finder(root: Path) -> PackageFinder:
    return PackageFinder(Paths.from_composer(root, {}))


def _mu_package(root: Path, name: str, files: dict[str, str]) -> Path:
    directory = root / "vendor" / name
    directory.mkdir(parents=True)
    for file_name, content in files.items():
        (directory / file_name).write_text(content, encoding="utf-8")
    return directory


def test_single_file_is_used_without_header(tmp_path: Path) -> None:
    directory = _mu_package(tmp_path, "acme/one", {"loader.php": "<?php\n"})
    write_installed(tmp_path, [{"name": "acme/one", "type": "wordpress-muplugin", "install-path": "../acme/one"}])

    entries = MuPluginList(_finder(tmp_path)).plugins_list()

    assert entries == {"acme/one": (directory / "loader.php").resolve()}


def test_multiple_files_are_keyed_by_base_name(tmp_path: Path) -> None:
    directory = _mu_package(
        tmp_path,
        "acme/multi",
        {
            "a.php": HEADER.format(name="A"),
            "b.php": HEADER.format(name="B"),
            "helpers.php": "<?php\nfunction helper() {}\n",
        },
    )
    write_installed(tmp_path, [{"name": "acme/multi", "type": "wordpress-muplugin"}])

    entries = MuPluginList(_finder(tmp_path)).plugins_list()

    assert entries == {
        "acme/multi_a": (directory / "a.php").resolve(),
        "acme/multi_b": (directory / "b.php").resolve(),
    }


def test_multiple_files_with_one_header_use_package_name(tmp_path: Path) -> None:
    directory = _mu_package(
        tmp_path,
        "acme/pair",
        {"main.php": HEADER.format(name="Main"), "inc.php": "<?php\n"},
    )
    write_installed(tmp_path, [{"name": "acme/pair", "type": "wordpress-muplugin"}])

    assert MuPluginList(_finder(tmp_path)).plugins_list() == {"acme/pair": (directory / "main.php").resolve()}


def test_other_package_types_are_ignored(tmp_path: Path) -> None:
    _mu_package(tmp_path, "acme/plugin", {"plugin.php": HEADER.format(name="P")})
    write_installed(tmp_path, [{"name": "acme/plugin", "type": "wordpress-plugin"}])

    assert MuPluginList(_finder(tmp_path)).plugins_list() == {}


def test_header_must_be_within_first_chunk(tmp_path: Path) -> None:
    late = tmp_path / "late.php"
    late.write_text("<?php\n" + ("//" + "x" * 100 + "\n") * (HEADER_BYTES // 50) + "/* Plugin Name: Late */\n")
    early = tmp_path / "early.php"
    early.write_text("<?php\n# Plugin Name: Early\n")
    empty_name = tmp_path / "empty.php"
    empty_name.write_text("<?php\n/* Plugin Name:   \n*/\n")

    assert is_plugin_file(early)
    assert not is_plugin_file(late)
    assert not is_plugin_file(empty_name)
    assert not is_plugin_file(tmp_path / "missing.php")
