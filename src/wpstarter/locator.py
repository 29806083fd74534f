# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Context object handed to every step and subsystem of a run."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .config import Config, keys, load_composer_json, load_config
from .downloads import DEFAULT_TIMEOUT, UrlDownloader
from .io import Io
from .mu_plugins import MuPluginList
from .packages import PackageFinder
from .paths import Paths


@dataclass(slots=True)
class Locator:
    """Bundle the shared services of a run; passed by reference, never global."""

    config: Config
    paths: Paths
    io: Io
    packages: PackageFinder
    downloader: UrlDownloader
    composer: Mapping[str, Any] = field(default_factory=dict)
    env: Mapping[str, str] = field(default_factory=lambda: dict(os.environ))

    @classmethod
    def from_root(cls, root: Path, io: Io, *, env: Mapping[str, str] | None = None) -> Locator:
        """Load ``composer.json`` and the starter configuration found under ``root``."""

        composer = load_composer_json(root)
        config = load_config(root, composer)
        paths = Paths.from_composer(root, composer)
        timeout = config[keys.DOWNLOAD_TIMEOUT].unwrap_or_fallback(DEFAULT_TIMEOUT)
        return cls(
            config=config,
            paths=paths,
            io=io,
            packages=PackageFinder(paths, composer),
            downloader=UrlDownloader(timeout=timeout),
            composer=composer,
            env=dict(os.environ) if env is None else dict(env),
        )

    def mu_plugins(self) -> MuPluginList:
        return MuPluginList(self.packages)


__all__ = ["Locator"]
