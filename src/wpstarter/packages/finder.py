# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Query package metadata already resolved by Composer."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Final

from ..errors import ConfigError
from ..paths import Paths
from .models import PackageRecord

INSTALLED_FILE: Final[str] = "composer/installed.json"


class PackageFinder:
    """Look up installed packages by type or name and locate their install directory."""

    def __init__(self, paths: Paths, composer: Mapping[str, Any] | None = None) -> None:
        self._paths = paths
        extra = (composer or {}).get("extra")
        installer_paths = extra.get("installer-paths") if isinstance(extra, Mapping) else None
        self._installer_paths: Mapping[str, Sequence[str]] = (
            installer_paths if isinstance(installer_paths, Mapping) else {}
        )
        self._packages: tuple[PackageRecord, ...] | None = None

    def all(self) -> tuple[PackageRecord, ...]:
        if self._packages is None:
            self._packages = self._load()
        return self._packages

    def find_by_type(self, package_type: str) -> list[PackageRecord]:
        return [package for package in self.all() if package.type == package_type]

    def find_by_name(self, name: str) -> PackageRecord | None:
        wanted = name.lower()
        return next((package for package in self.all() if package.name == wanted), None)

    def find_path_of(self, package: PackageRecord) -> Path | None:
        """Return the directory ``package`` is installed into, if it exists.

        Resolution order: the ``install-path`` recorded by Composer 2, then the
        project ``installer-paths``, then ``<vendor-dir>/<name>``.
        """

        candidates: list[Path] = []
        if package.install_path is not None:
            candidates.append(package.install_path)
        installer_path = self._installer_path(package)
        if installer_path is not None:
            candidates.append(installer_path)
        candidates.append(self._paths.vendor(package.name))
        return next((candidate for candidate in candidates if candidate.is_dir()), None)

    def _installer_path(self, package: PackageRecord) -> Path | None:
        for template, matchers in self._installer_paths.items():
            if isinstance(matchers, str):
                matchers = [matchers]
            if not any(self._matches(package, str(matcher)) for matcher in matchers):
                continue
            relative = template.replace("{$name}", package.short_name).replace("{$vendor}", package.vendor)
            return self._paths.root(relative)
        return None

    @staticmethod
    def _matches(package: PackageRecord, matcher: str) -> bool:
        kind, sep, value = matcher.partition(":")
        if sep and kind == "type":
            return package.type == value
        if sep and kind == "vendor":
            return package.vendor == value.lower()
        return package.name == matcher.lower()

    def _load(self) -> tuple[PackageRecord, ...]:
        installed = self._paths.vendor(INSTALLED_FILE)
        if not installed.is_file():
            return ()
        try:
            data = json.loads(installed.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigError(f"Unable to read installed packages from {installed}: {exc}") from exc
        entries = data.get("packages", []) if isinstance(data, Mapping) else data
        if not isinstance(entries, list):
            return ()
        base_dir = installed.parent
        return tuple(
            PackageRecord.from_installed(entry, base_dir=base_dir)
            for entry in entries
            if isinstance(entry, Mapping) and entry.get("name")
        )


__all__ = ["INSTALLED_FILE", "PackageFinder"]
