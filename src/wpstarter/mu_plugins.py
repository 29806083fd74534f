# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Discover entry files of MU plugins installed through Composer."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Final

from .packages import PackageFinder, PackageRecord

MU_PLUGIN_TYPE: Final[str] = "wordpress-muplugin"
HEADER_BYTES: Final[int] = 8192
_PLUGIN_HEADER_RE: Final[re.Pattern[str]] = re.compile(
    r"^[ \t/*#@]*Plugin Name:(.*)$",
    re.IGNORECASE | re.MULTILINE,
)


def is_plugin_file(path: Path) -> bool:
    """Return whether the first 8 KiB of ``path`` carry a ``Plugin Name:`` header."""

    try:
        with path.open("rb") as handle:
            data = handle.read(HEADER_BYTES)
    except OSError:
        return False
    if not data:
        return False
    text = data.decode("utf-8", errors="ignore").replace("\r\n", "\n").replace("\r", "\n")
    match = _PLUGIN_HEADER_RE.search(text)
    return match is not None and bool(match.group(1).strip())


class MuPluginList:
    """Map installed MU plugin packages to the PHP files WordPress must load."""

    def __init__(self, finder: PackageFinder) -> None:
        self._finder = finder

    def plugins_list(self) -> dict[str, Path]:
        """Return entry files keyed by package name.

        A package contributing several entry files gets one key per file, the
        package name suffixed with the file base name.
        """

        entries: dict[str, Path] = {}
        for package in self._finder.find_by_type(MU_PLUGIN_TYPE):
            files = self._entry_files(package)
            multi = len(files) > 1
            for file in files:
                key = f"{package.name}_{file.stem}" if multi else package.name
                entries[key] = file
        return entries

    def _entry_files(self, package: PackageRecord) -> list[Path]:
        directory = self._finder.find_path_of(package)
        if directory is None:
            return []
        files = sorted(candidate for candidate in directory.glob("*.php") if candidate.is_file())
        # A single script is the entry point, no header scan needed.
        if len(files) == 1:
            return [files[0].resolve()]
        return [file.resolve() for file in files if is_plugin_file(file)]


__all__ = ["HEADER_BYTES", "MU_PLUGIN_TYPE", "MuPluginList", "is_plugin_file"]
