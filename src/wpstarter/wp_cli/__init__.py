# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""WP-CLI acquisition, verification and execution."""

from __future__ import annotations

from .executor import ExecutorFactory, PhpToolExecutor, ProcessResult, find_php
from .integrity import PharVerifier, VerificationResult, VerificationStatus
from .tool import WpCliTool

__all__ = [
    "ExecutorFactory",
    "PharVerifier",
    "PhpToolExecutor",
    "ProcessResult",
    "VerificationResult",
    "VerificationStatus",
    "WpCliTool",
    "find_php",
]
