# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Access to packages installed by Composer."""

from __future__ import annotations

from .finder import INSTALLED_FILE, PackageFinder
from .models import PackageRecord
from .wp_version import MIN_WP_VERSION, WP_CORE_TYPE, WpVersion, normalize_wp_version

__all__ = [
    "INSTALLED_FILE",
    "MIN_WP_VERSION",
    "WP_CORE_TYPE",
    "PackageFinder",
    "PackageRecord",
    "WpVersion",
    "normalize_wp_version",
]
