# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Discover the WordPress version installed through Composer."""

from __future__ import annotations

from typing import Final

from packaging.version import InvalidVersion, Version

from ..io import Io
from .finder import PackageFinder

MIN_WP_VERSION: Final[str] = "4.7"
WP_CORE_TYPE: Final[str] = "wordpress-core"


def normalize_wp_version(raw: str | None, *, min_version: str = MIN_WP_VERSION) -> str | None:
    """Return ``raw`` in WordPress' own version format when it is supported.

    Composer reports four-part versions (``5.9.0.0``); WordPress uses at most three
    parts and omits a trailing zero patch (``5.9``).

    Args:
        raw: Version string reported by Composer.
        min_version: Oldest supported WordPress version.

    Returns:
        str | None: Normalised version, or ``None`` for unparsable or unsupported versions.
    """

    if not raw:
        return None
    try:
        version = Version(raw.strip().lstrip("vV"))
    except InvalidVersion:
        return None
    if version < Version(min_version):
        return None
    parts = list(version.release[:3])
    while len(parts) > 2 and parts[-1] == 0:
        parts.pop()
    while len(parts) < 2:
        parts.append(0)
    return ".".join(str(part) for part in parts)


class WpVersion:
    """Find the single installed WordPress core package and report its version."""

    def __init__(self, finder: PackageFinder, io: Io, *, min_version: str = MIN_WP_VERSION) -> None:
        self._finder = finder
        self._io = io
        self._min_version = min_version

    def discover(self) -> str | None:
        cores = self._finder.find_by_type(WP_CORE_TYPE)
        if not cores:
            return None
        if len(cores) > 1:
            names = ", ".join(core.name for core in cores)
            self._io.fail(f"Seems that more WordPress core packages are provided: {names}.")
            self._io.fail("Only one WordPress core package is supported.")
            return None
        core = cores[0]
        version = normalize_wp_version(core.version, min_version=self._min_version)
        if version is None:
            self._io.warn(
                f"WordPress version '{core.version}' of {core.name} is not supported, "
                f"minimum supported version is {self._min_version}."
            )
        return version


__all__ = ["MIN_WP_VERSION", "WP_CORE_TYPE", "WpVersion", "normalize_wp_version"]
