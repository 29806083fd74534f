# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Wrapper around a single configuration entry."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from ..errors import ConfigError


@dataclass(frozen=True, slots=True)
class ConfigValue:
    """Validated configuration value, or the reason it could not be validated.

    A value is *errored* when the raw configuration could not be coerced to the
    expected type. Errored and missing values both fall back to the caller's
    default in :meth:`unwrap_or_fallback`.
    """

    value: Any = None
    error: str | None = None

    @classmethod
    def of(cls, value: Any) -> ConfigValue:
        return cls(value=value)

    @classmethod
    def errored(cls, message: str) -> ConfigValue:
        return cls(error=message)

    def is_errored(self) -> bool:
        return self.error is not None

    def unwrap(self) -> Any:
        """Return the wrapped value.

        Raises:
            ConfigError: When the value failed validation.
        """

        if self.error is not None:
            raise ConfigError(self.error)
        return self.value

    def unwrap_or_fallback(self, default: Any = None) -> Any:
        if self.error is not None or self.value is None:
            return default
        return self.value

    def not_empty(self) -> bool:
        if self.error is not None or self.value is None:
            return False
        if isinstance(self.value, (str, Mapping, Sequence)):
            return len(self.value) > 0
        return True

    def is_(self, value: Any) -> bool:
        return self.error is None and self.value is not None and self.value == value

    def is_not(self, value: Any) -> bool:
        return not self.is_(value)


__all__ = ["ConfigValue"]
