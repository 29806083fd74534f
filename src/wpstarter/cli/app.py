# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..errors import FatalError, StepFailedError, WpStarterError
from ..io import Io, build_io
from ..starter import WpStarter

app = typer.Typer(
    name="wpstarter",
    help="Scaffold a Composer-based WordPress installation.",
    no_args_is_help=True,
    add_completion=False,
)

RootOption = Annotated[
    Path,
    typer.Option("--root", "-r", help="Project root holding composer.json.", file_okay=False),
]
EmojiOption = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji in CLI output.")]


def _report_error(io: Io, exc: WpStarterError) -> None:
    if isinstance(exc, FatalError):
        io.error_block("Error running WP Starter.", str(exc))
    elif not isinstance(exc, StepFailedError):
        io.fail(str(exc))


@app.command("run")
def run_command(
    steps: Annotated[
        list[str] | None,
        typer.Argument(help="Only run these steps (catalog order is kept)."),
    ] = None,
    root: RootOption = Path("."),
    emoji: EmojiOption = True,
    debug: Annotated[bool, typer.Option("--debug", help="Print debug output.")] = False,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable coloured output.")] = False,
) -> None:
    """Run the WP Starter steps against the project at ROOT."""

    io = build_io(emoji=emoji, debug=debug, no_color=no_color)
    try:
        outcome = WpStarter.from_root(root.resolve(), io).run(steps or ())
    except WpStarterError as exc:
        _report_error(io, exc)
        raise typer.Exit(code=exc.exit_code) from exc
    raise typer.Exit(code=0 if outcome.ok else 1)


@app.command("steps")
def steps_command(
    steps: Annotated[list[str] | None, typer.Argument(help="Restrict the listing to these steps.")] = None,
    root: RootOption = Path("."),
    emoji: EmojiOption = True,
) -> None:
    """List the steps a run would execute, in order."""

    io = build_io(emoji=emoji)
    try:
        catalog = WpStarter.from_root(root.resolve(), io).catalog(steps or ())
    except WpStarterError as exc:
        io.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    for name, reference in catalog:
        label = reference if isinstance(reference, str) else getattr(reference, "__qualname__", repr(reference))
        io.echo(f"{name}\t{label}")


def main() -> None:
    app()


__all__ = ["app", "main"]
