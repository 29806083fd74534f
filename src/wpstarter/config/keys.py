# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration keys recognised by the starter."""

from __future__ import annotations

from typing import Final

EXTRA_KEY: Final[str] = "wpstarter"
DEFAULT_CONFIG_FILE: Final[str] = "wpstarter.json"

CUSTOM_STEPS: Final[str] = "custom-steps"
SKIP_STEPS: Final[str] = "skip-steps"
WP_CLI_COMMANDS: Final[str] = "wp-cli-commands"
INSTALL_WP_CLI: Final[str] = "install-wp-cli"
REQUIRE_WP: Final[str] = "require-wp"
WP_VERSION: Final[str] = "wp-version"
CONTENT_DEV_OP: Final[str] = "content-dev-op"
EARLY_HOOK_FILE: Final[str] = "early-hook-file"
UNKNOWN_DROPINS: Final[str] = "unknown-dropins"
DOWNLOAD_TIMEOUT: Final[str] = "download-timeout"
WP_CLI_TIMEOUT: Final[str] = "wp-cli-timeout"
WP_CLI_EXECUTOR: Final[str] = "wp-cli-executor"

__all__ = [
    "CONTENT_DEV_OP",
    "CUSTOM_STEPS",
    "DEFAULT_CONFIG_FILE",
    "DOWNLOAD_TIMEOUT",
    "EARLY_HOOK_FILE",
    "EXTRA_KEY",
    "INSTALL_WP_CLI",
    "REQUIRE_WP",
    "SKIP_STEPS",
    "UNKNOWN_DROPINS",
    "WP_CLI_COMMANDS",
    "WP_CLI_EXECUTOR",
    "WP_CLI_TIMEOUT",
    "WP_VERSION",
]
