# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load starter configuration from ``composer.json`` and the JSON config file."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ..errors import ConfigError
from .keys import DEFAULT_CONFIG_FILE, EXTRA_KEY
from .store import Config

COMPOSER_FILE = "composer.json"


def read_json_object(path: Path) -> dict[str, Any]:
    """Return the JSON object stored at ``path`` or ``{}`` when the file is missing.

    Raises:
        ConfigError: If the file can't be parsed or does not hold an object.
    """

    if not path.is_file():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Unable to read configuration from {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration at {path} must be a JSON object")
    return data


def load_composer_json(root: Path) -> dict[str, Any]:
    return read_json_object(root / COMPOSER_FILE)


def extract_config(root: Path, extra: Mapping[str, Any]) -> dict[str, Any]:
    """Merge the inline ``extra.wpstarter`` block with the starter JSON file.

    The block may be an object (inline settings) or a string naming a JSON file
    relative to ``root``; in the latter case that file replaces the default
    ``wpstarter.json``. Values from the file win over inline values.

    Args:
        root: Project root directory.
        extra: The ``extra`` object of ``composer.json``.

    Returns:
        dict[str, Any]: Raw, unvalidated configuration.
    """

    block = extra.get(EXTRA_KEY)
    inline: dict[str, Any] = {}
    file_name = DEFAULT_CONFIG_FILE
    if isinstance(block, str) and block.strip():
        file_name = block.strip()
    elif isinstance(block, Mapping):
        inline = dict(block)
    elif block is not None:
        raise ConfigError(f"'extra.{EXTRA_KEY}' must be an object or a file name")

    config_path = Path(file_name)
    if not config_path.is_absolute():
        config_path = root / config_path
    return {**inline, **read_json_object(config_path)}


def load_config(root: Path, composer: Mapping[str, Any] | None = None) -> Config:
    """Build the :class:`Config` store for the project at ``root``."""

    data = load_composer_json(root) if composer is None else composer
    extra = data.get("extra")
    return Config(extract_config(root, extra if isinstance(extra, Mapping) else {}), root=root)


__all__ = ["COMPOSER_FILE", "extract_config", "load_composer_json", "load_config", "read_json_object"]
