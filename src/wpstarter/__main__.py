# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Allow ``python -m wpstarter``."""

from __future__ import annotations

from .cli import main

main()
