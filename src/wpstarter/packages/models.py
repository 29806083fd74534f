# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Read-only records describing packages installed by Composer."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PackageRecord(BaseModel):
    """Single entry of Composer's ``installed.json``."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str = "library"
    version: str | None = None
    install_path: Path | None = None
    extra: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_installed(cls, data: Mapping[str, Any], *, base_dir: Path) -> PackageRecord:
        """Build a record from an ``installed.json`` entry.

        Args:
            data: Raw package entry.
            base_dir: Directory Composer 2 ``install-path`` values are relative to.

        Returns:
            PackageRecord: Normalised record.
        """

        raw_path = data.get("install-path")
        install_path = (base_dir / raw_path).resolve() if isinstance(raw_path, str) and raw_path else None
        extra = data.get("extra")
        version = data.get("version_normalized") or data.get("version")
        return cls(
            name=str(data.get("name", "")).lower(),
            type=str(data.get("type") or "library"),
            version=str(version) if version else None,
            install_path=install_path,
            extra=dict(extra) if isinstance(extra, Mapping) else {},
        )

    @property
    def vendor(self) -> str:
        return self.name.partition("/")[0]

    @property
    def short_name(self) -> str:
        return self.name.rpartition("/")[2]


__all__ = ["PackageRecord"]
