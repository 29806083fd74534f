# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration store, values and loaders."""

from __future__ import annotations

from . import keys
from .loader import extract_config, load_composer_json, load_config
from .store import DEFAULTS, Config
from .values import ConfigValue

__all__ = [
    "DEFAULTS",
    "Config",
    "ConfigValue",
    "extract_config",
    "keys",
    "load_composer_json",
    "load_config",
]
