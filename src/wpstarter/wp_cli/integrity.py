# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Verify downloaded WP-CLI phars against the published checksum."""

from __future__ import annotations

import hashlib
from collections.abc import Collection
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Final

from ..downloads import UrlDownloader
from ..io import Io
from .tool import WpCliTool

STRONG_ALGORITHM: Final[str] = "sha512"
WEAK_ALGORITHM: Final[str] = "md5"
_CHUNK_SIZE: Final[int] = 1 << 16


class VerificationStatus(StrEnum):
    VERIFIED = "verified"
    FETCH_FAILED = "fetch-failed"
    MISMATCH = "mismatch"


@dataclass(frozen=True, slots=True)
class VerificationResult:
    status: VerificationStatus
    algorithm: str
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is VerificationStatus.VERIFIED


def file_digest(path: Path, algorithm: str) -> str:
    digest = hashlib.new(algorithm, usedforsecurity=False)
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


class PharVerifier:
    """Compare a local phar with the checksum published next to the release."""

    def __init__(
        self,
        tool: WpCliTool,
        downloader: UrlDownloader,
        io: Io,
        *,
        algorithms: Collection[str] | None = None,
    ) -> None:
        self._tool = tool
        self._downloader = downloader
        self._io = io
        self._algorithms = hashlib.algorithms_available if algorithms is None else algorithms

    def hash_algorithm(self) -> str:
        if STRONG_ALGORITHM in self._algorithms:
            return STRONG_ALGORITHM
        self._io.comment(
            "NOTICE: SHA-512 algorithm is not available on the system, "
            f"the less secure MD5 will be used to check {self._tool.nice_name} phar integrity."
        )
        return WEAK_ALGORITHM

    def checksum_url(self, algorithm: str) -> str:
        return f"{self._tool.phar_url}.{algorithm}"

    def verify(self, phar_path: Path) -> VerificationResult:
        """Download the expected checksum and compare it with ``phar_path``.

        Args:
            phar_path: Local phar to check.

        Returns:
            VerificationResult: ``VERIFIED``, ``FETCH_FAILED`` or ``MISMATCH``;
            failures are also reported through :class:`Io`.
        """

        algorithm = self.hash_algorithm()
        url = self.checksum_url(algorithm)
        body = self._downloader.fetch(url)
        expected = body.strip().split()[0].lower() if body and body.strip() else ""
        if not expected:
            message = f"Failed to download {algorithm} hash from {url}."
            self._io.fail(message)
            if self._downloader.error:
                self._io.fail(self._downloader.error)
            return VerificationResult(VerificationStatus.FETCH_FAILED, algorithm, message)

        if file_digest(phar_path, algorithm) != expected:
            message = f"{algorithm} hash check failed for downloaded {self._tool.nice_name} phar."
            self._io.fail(message)
            return VerificationResult(VerificationStatus.MISMATCH, algorithm, message)

        return VerificationResult(VerificationStatus.VERIFIED, algorithm)


__all__ = [
    "STRONG_ALGORITHM",
    "WEAK_ALGORITHM",
    "PharVerifier",
    "VerificationResult",
    "VerificationStatus",
    "file_digest",
]
