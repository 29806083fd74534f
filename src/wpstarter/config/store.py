# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration store shared by every component of a run."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator, Mapping
from pathlib import Path
from typing import Annotated, Any, Final, Literal

from pydantic import Field, TypeAdapter, ValidationError

from ..errors import ConfigError
from . import keys
from .values import ConfigValue

Validator = Callable[[Any], Any]

_STEP_MAP: Final[TypeAdapter[dict[str, str]]] = TypeAdapter(dict[str, str])
_STR_LIST: Final[TypeAdapter[list[str]]] = TypeAdapter(list[str])
_BOOL: Final[TypeAdapter[bool]] = TypeAdapter(bool)
_STR: Final[TypeAdapter[str]] = TypeAdapter(str)
_CONTENT_DEV_OP: Final[TypeAdapter[Literal["symlink", "copy", "none"]]] = TypeAdapter(
    Literal["symlink", "copy", "none"]
)
_DROPINS: Final[TypeAdapter[bool | Literal["ask"]]] = TypeAdapter(bool | Literal["ask"])
_TIMEOUT: Final[TypeAdapter[float]] = TypeAdapter(Annotated[float, Field(gt=0)])

DEFAULTS: Final[Mapping[str, Any]] = {
    keys.CUSTOM_STEPS: {},
    keys.SKIP_STEPS: [],
    keys.WP_CLI_COMMANDS: [],
    keys.INSTALL_WP_CLI: True,
    keys.REQUIRE_WP: True,
    keys.CONTENT_DEV_OP: "symlink",
    keys.UNKNOWN_DROPINS: False,
    keys.DOWNLOAD_TIMEOUT: 30.0,
    keys.WP_CLI_TIMEOUT: 600.0,
}


def _validate_skip_steps(raw: Any) -> list[str]:
    if isinstance(raw, str):
        return [raw]
    return _STR_LIST.validate_python(raw)


def _validate_version(raw: Any) -> str:
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        raw = str(raw)
    value = _STR.validate_python(raw).strip()
    if not value:
        raise ValueError("version must not be empty")
    return value


class Config(Mapping[str, ConfigValue]):
    """Read-mostly mapping of configuration keys to :class:`ConfigValue` objects.

    Raw values are validated on first access. The only supported mutation is
    :meth:`append_config`, which refuses to overwrite a value that is already set.
    """

    def __init__(self, raw: Mapping[str, Any], *, root: Path) -> None:
        self._raw: dict[str, Any] = {**DEFAULTS, **raw}
        self._root = root
        self._resolved: dict[str, ConfigValue] = {}
        self._validators: dict[str, Validator] = {
            keys.CUSTOM_STEPS: _STEP_MAP.validate_python,
            keys.SKIP_STEPS: _validate_skip_steps,
            keys.WP_CLI_COMMANDS: self._validate_commands,
            keys.INSTALL_WP_CLI: _BOOL.validate_python,
            keys.REQUIRE_WP: _BOOL.validate_python,
            keys.WP_VERSION: _validate_version,
            keys.CONTENT_DEV_OP: _CONTENT_DEV_OP.validate_python,
            keys.EARLY_HOOK_FILE: _STR.validate_python,
            keys.UNKNOWN_DROPINS: _DROPINS.validate_python,
            keys.DOWNLOAD_TIMEOUT: _TIMEOUT.validate_python,
            keys.WP_CLI_TIMEOUT: _TIMEOUT.validate_python,
        }

    def __getitem__(self, key: str) -> ConfigValue:
        if key not in self._resolved:
            self._resolved[key] = self._resolve(key)
        return self._resolved[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._raw)

    def __len__(self) -> int:
        return len(self._raw)

    def __contains__(self, key: object) -> bool:
        return key in self._raw

    def append_config(self, key: str, value: Any) -> ConfigValue:
        """Bind ``value`` to ``key`` when the key holds no value yet.

        Args:
            key: Configuration key to populate.
            value: Value computed at run time (a discovered version, an executor, ...).

        Returns:
            ConfigValue: The validated value now bound to ``key``.

        Raises:
            ConfigError: If ``key`` already holds a non-empty value or ``value`` is invalid.
        """

        if self[key].not_empty():
            raise ConfigError(f"Configuration '{key}' is already set and can't be overwritten.")
        self._raw[key] = value
        self._resolved.pop(key, None)
        resolved = self[key]
        if resolved.is_errored():
            del self._raw[key]
            self._resolved.pop(key, None)
            raise ConfigError(resolved.error or f"Invalid value for '{key}'.")
        return resolved

    def _resolve(self, key: str) -> ConfigValue:
        if key not in self._raw:
            return ConfigValue()
        raw = self._raw[key]
        validator = self._validators.get(key)
        if validator is None or raw is None:
            return ConfigValue.of(raw)
        try:
            return ConfigValue.of(validator(raw))
        except ValidationError as exc:
            reason = exc.errors()[0]["msg"] if exc.errors() else str(exc)
            return ConfigValue.errored(f"Invalid value for '{key}': {reason}")
        except (ValueError, TypeError, OSError) as exc:
            return ConfigValue.errored(f"Invalid value for '{key}': {exc}")

    def _validate_commands(self, raw: Any) -> list[str]:
        """Accept a list of commands or the path of a JSON file holding one."""

        if not isinstance(raw, str):
            return _STR_LIST.validate_python(raw)
        path = Path(raw)
        if not path.is_absolute():
            path = self._root / path
        if path.suffix.lower() != ".json" or not path.is_file():
            raise ValueError(f"'{raw}' is not a JSON file of commands")
        return _STR_LIST.validate_python(json.loads(path.read_text(encoding="utf-8")))


__all__ = ["DEFAULTS", "Config"]
