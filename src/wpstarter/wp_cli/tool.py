# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Descriptor of the WP-CLI companion tool."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from packaging.version import InvalidVersion, Version

from ..config import Config, keys
from ..paths import Paths

PHAR_NAME: Final[str] = "wp-cli.phar"
VERSIONED_PHAR_PREFIX: Final[str] = "wp-cli-"
CONFIG_FILE: Final[str] = "wp-cli.yml"

# Upstream variables forwarded to the child process only when set.
FORWARDED_ENV: Final[tuple[str, ...]] = (
    "WP_CLI_CACHE_DIR",
    "WP_CLI_PACKAGES_DIR",
    "WP_CLI_STRICT_ARGS_MODE",
)


def _versioned_phars(root: Path) -> list[Path]:
    versioned: list[tuple[Version, Path]] = []
    unversioned: list[Path] = []
    for candidate in root.glob(f"{VERSIONED_PHAR_PREFIX}*.phar"):
        raw = candidate.stem[len(VERSIONED_PHAR_PREFIX) :]
        try:
            versioned.append((Version(raw), candidate))
        except InvalidVersion:
            unversioned.append(candidate)
    versioned.sort(key=lambda item: (item[0], item[1].name), reverse=True)
    return [path for _, path in versioned] + sorted(unversioned)


@dataclass(frozen=True, slots=True)
class WpCliTool:
    """Where WP-CLI comes from and how it must be launched."""

    download_enabled: bool = True
    nice_name: str = "WP CLI"
    package_name: str = "wp-cli/wp-cli"
    min_version: str = "2.0.1"

    @classmethod
    def from_config(cls, config: Config) -> WpCliTool:
        return cls(download_enabled=bool(config[keys.INSTALL_WP_CLI].unwrap_or_fallback(True)))

    @property
    def phar_url(self) -> str:
        """Release URL of the phar, empty when downloads are disabled."""

        if not self.download_enabled:
            return ""
        ver = self.min_version
        return f"https://github.com/wp-cli/wp-cli/releases/download/v{ver}/wp-cli-{ver}.phar"

    def download_target(self, paths: Paths) -> Path:
        return paths.root(PHAR_NAME)

    def phar_target(self, paths: Paths) -> Path | None:
        """Return the first phar found in the project root.

        ``wp-cli.phar`` wins; otherwise ``wp-cli-<version>.phar`` files are tried
        newest version first, so a manually pinned phar beats a download.
        """

        candidates = [paths.root(PHAR_NAME), *_versioned_phars(paths.root())]
        return next((candidate for candidate in candidates if candidate.is_file()), None)

    def filesystem_bootstrap(self, package_dir: Path) -> Path:
        return package_dir / "php" / "boot-fs.php"

    def process_env(self, paths: Paths, env: Mapping[str, str]) -> dict[str, str]:
        """Return the variables to set for the child process.

        Auto-update checks are disabled unless the caller decided otherwise;
        forwarded variables that are unset or empty upstream are omitted.
        """

        values: dict[str, str | None] = {
            "WP_CLI_CONFIG_PATH": str(paths.root(CONFIG_FILE)),
            "WP_CLI_DISABLE_AUTO_CHECK_UPDATE": env.get("WP_CLI_DISABLE_AUTO_CHECK_UPDATE") or "1",
        }
        for name in FORWARDED_ENV:
            values[name] = env.get(name)
        return {name: value for name, value in values.items() if value}


__all__ = ["CONFIG_FILE", "FORWARDED_ENV", "PHAR_NAME", "WpCliTool"]
