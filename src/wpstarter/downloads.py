# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Attempt-once HTTP downloads with an explicit timeout."""

from __future__ import annotations

import shutil
import ssl
import urllib.request
from pathlib import Path
from typing import Final
from urllib.parse import urlparse

from . import __version__

_SUPPORTED_SCHEMES: Final[frozenset[str]] = frozenset({"https", "http"})
DEFAULT_TIMEOUT: Final[float] = 30.0


class UrlDownloader:
    """Fetch remote resources, remembering the last failure message."""

    def __init__(self, *, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._timeout = timeout
        self._error = ""
        self._opener = urllib.request.build_opener(
            urllib.request.HTTPSHandler(context=ssl.create_default_context())
        )

    @property
    def error(self) -> str:
        return self._error

    def fetch(self, url: str) -> str | None:
        """Return the body of ``url`` decoded as text, or ``None`` on failure."""

        self._error = ""
        try:
            with self._open(url) as response:
                return response.read().decode("utf-8", errors="replace")
        except (OSError, ValueError) as exc:
            self._error = f"Failed to fetch {url}: {exc}"
            return None

    def save(self, url: str, target: Path) -> bool:
        """Stream ``url`` into ``target``; a partial file is removed on failure."""

        self._error = ""
        target.parent.mkdir(parents=True, exist_ok=True)
        try:
            with self._open(url) as response, target.open("wb") as handle:
                shutil.copyfileobj(response, handle)
        except (OSError, ValueError) as exc:
            target.unlink(missing_ok=True)
            self._error = f"Failed to download {url}: {exc}"
            return False
        return True

    def _open(self, url: str):  # noqa: ANN202
        parsed = urlparse(url)
        if parsed.scheme.lower() not in _SUPPORTED_SCHEMES:
            raise ValueError(f"Unsupported download scheme '{parsed.scheme}'")
        request = urllib.request.Request(url, headers={"User-Agent": f"wpstarter/{__version__}"})
        return self._opener.open(request, timeout=self._timeout)


__all__ = ["DEFAULT_TIMEOUT", "UrlDownloader"]
