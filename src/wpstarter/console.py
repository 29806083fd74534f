# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich consoles shared by the output helpers."""

from __future__ import annotations

import sys
from functools import lru_cache

from rich.console import Console


def detect_tty() -> bool:
    """Return whether stdout is a terminal; a closed or missing stream is not."""

    stream = sys.stdout
    try:
        return bool(stream and stream.isatty())
    except ValueError:
        return False


class RichConsoleManager:
    """Hand out one console per effective colour and emoji combination.

    Colour is only effective on a terminal, so asking for colour on a pipe
    returns the same console as asking for none.
    """

    def __init__(self) -> None:
        self._consoles: dict[tuple[bool, bool], Console] = {}

    def get(self, *, color: bool, emoji: bool) -> Console:
        terminal = detect_tty()
        colored = color and terminal
        key = (colored, emoji)
        console = self._consoles.get(key)
        if console is None:
            console = Console(
                color_system="auto" if colored else None,
                force_terminal=True if colored else None,
                no_color=not colored,
                emoji=emoji,
                soft_wrap=True,
                highlight=False,
            )
            self._consoles[key] = console
        return console


@lru_cache(maxsize=1)
def get_console_manager() -> RichConsoleManager:
    return RichConsoleManager()


__all__ = ["RichConsoleManager", "detect_tty", "get_console_manager"]
