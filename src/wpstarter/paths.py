# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem locations of the project being scaffolded."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

DEFAULT_VENDOR_DIR: Final[str] = "vendor"
DEFAULT_WP_DIR: Final[str] = "wordpress"
DEFAULT_CONTENT_DIR: Final[str] = "wp-content"


def _join(base: Path, relative: str | Path) -> Path:
    rel = str(relative).strip("/\\")
    return base / rel if rel else base


@dataclass(frozen=True, slots=True)
class Paths:
    """Resolved project directories."""

    root_dir: Path
    vendor_dir: Path
    bin_dir: Path
    wp_dir: Path
    wp_content_dir: Path

    @classmethod
    def from_composer(cls, root: Path, composer: Mapping[str, Any]) -> Paths:
        """Resolve directories from the ``config`` and ``extra`` objects of ``composer.json``."""

        resolved_root = root.resolve()
        config = composer.get("config") if isinstance(composer.get("config"), Mapping) else {}
        extra = composer.get("extra") if isinstance(composer.get("extra"), Mapping) else {}
        vendor = _join(resolved_root, str(config.get("vendor-dir") or DEFAULT_VENDOR_DIR))
        bin_raw = config.get("bin-dir")
        bin_dir = _join(resolved_root, str(bin_raw)) if bin_raw else vendor / "bin"
        wp = _join(resolved_root, str(extra.get("wordpress-install-dir") or DEFAULT_WP_DIR))
        content = _join(resolved_root, str(extra.get("wordpress-content-dir") or DEFAULT_CONTENT_DIR))
        return cls(root_dir=resolved_root, vendor_dir=vendor, bin_dir=bin_dir, wp_dir=wp, wp_content_dir=content)

    def root(self, relative: str | Path = "") -> Path:
        return _join(self.root_dir, relative)

    def vendor(self, relative: str | Path = "") -> Path:
        return _join(self.vendor_dir, relative)

    def bin(self, relative: str | Path = "") -> Path:
        return _join(self.bin_dir, relative)

    def wp(self, relative: str | Path = "") -> Path:
        return _join(self.wp_dir, relative)

    def wp_parent(self, relative: str | Path = "") -> Path:
        """Return a path inside the web root, the directory holding WordPress."""

        return _join(self.wp_dir.parent, relative)

    def wp_content(self, relative: str | Path = "") -> Path:
        return _join(self.wp_content_dir, relative)


__all__ = ["Paths"]
