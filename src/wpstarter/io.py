# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console adapter shared by every component taking part in a run."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from rich.console import Console
from rich.text import Text

from .console import detect_tty, get_console_manager
from .logging import emoji, print_line, section

_LOGO: Final[tuple[tuple[str, str], ...]] = (
    (r" __      __ ___  ", r"  ___  _____  _    ___  _____  ___  ___  "),
    (r" \ \    / /| _ \ ", r" / __||_   _|/_\  | _ \|_   _|| __|| _ \ "),
    (r"  \ \/\/ / |  _/ ", r" \__ \  | | / _ \ |   /  | |  | _| |   / "),
    (r"   \_/\_/  |_|   ", r" |___/  |_|/_/ \_\|_|_\  |_|  |___||_|_\ "),
)
_KEY_VALUE_RE: Final[re.Pattern[str]] = re.compile(r"([\w-]+)=(\".*?\"|\S+)")


@dataclass(slots=True)
class Io:
    """Adapter around the logging helpers honouring emoji, colour and debug settings."""

    console: Console
    use_emoji: bool = True
    use_color: bool = False
    debug_enabled: bool = False

    def info(self, message: str) -> None:
        self._line(f"{emoji('ℹ️ ', self.use_emoji)}{message}", "cyan")

    def ok(self, message: str) -> None:
        self._line(f"{emoji('✅ ', self.use_emoji)}{message}", "green")

    def warn(self, message: str) -> None:
        self._line(f"{emoji('⚠️ ', self.use_emoji)}{message}", "yellow")

    def fail(self, message: str) -> None:
        self._line(f"{emoji('❌ ', self.use_emoji)}{message}", "red")

    def comment(self, message: str) -> None:
        """Write a low-priority notice."""

        self._line(message, "yellow")

    def echo(self, message: str) -> None:
        self.console.print(Text(message))

    def section(self, title: str) -> None:
        section(title, use_color=self.use_color, console=self.console)

    def error_block(self, *lines: str) -> None:
        """Render ``lines`` as a highlighted block used for fatal errors."""

        width = max((len(line) for line in lines), default=0) + 8
        padded = ["", *lines, ""]
        self.console.print()
        for line in padded:
            text = Text(f"    {line}".ljust(width))
            if self.use_color:
                text.stylize("bold white on red")
            self.console.print(text)
        self.console.print()

    def logo(self) -> None:
        self.console.print()
        for left, right in _LOGO:
            text = Text(left, style="magenta" if self.use_color else "")
            text.append(right, style="yellow" if self.use_color else "")
            self.console.print(text)
        self.console.print()

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled.

        Args:
            message: Debug payload rendered with simple key/value highlighting.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in _KEY_VALUE_RE.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            key, raw_value = match.group(1), match.group(2)
            text.append(key, style="bold magenta")
            text.append("=", style="dim")
            text.append(raw_value, style="bold blue" if key in {"command", "cmd"} else "bold green")
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        self.console.print(text)

    def _line(self, message: str, style: str) -> None:
        print_line(
            message,
            style=style,
            use_emoji=self.use_emoji,
            use_color=self.use_color,
            console=self.console,
        )


def build_io(*, emoji: bool, debug: bool = False, no_color: bool = False) -> Io:
    """Return an :class:`Io` bound to a dedicated Rich console.

    Args:
        emoji: Whether output may include emoji glyphs.
        debug: Whether debug messages should be rendered.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        Io: Adapter ready to be shared by a single run.
    """

    use_color = not no_color and detect_tty()
    console = get_console_manager().get(color=use_color, emoji=emoji)
    return Io(console=console, use_emoji=emoji, use_color=use_color, debug_enabled=debug)


__all__ = ["Io", "build_io"]
