"""Browse command - launch the interactive TUI."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from datadock.cli.common import VerboseOption


def browse(
    screen: Annotated[
        str,
        typer.Option(
            "--screen",
            "-s",
            help="Screen to show on startup (data, compiler)",
        ),
    ] = "data",
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write logs to this file while the TUI is running",
            dir_okay=False,
        ),
    ] = None,
    verbose: VerboseOption = 0,
) -> None:
    """Open the interactive Data API / Data Compiler browser.

    Keys: d = Data API, c = Data Compiler, r = reload tables, q = quit.

    Examples:

        datadock browse

        datadock browse --screen compiler --log-file datadock.log -v
    """
    if screen not in ("data", "compiler"):
        raise typer.BadParameter(f"unknown screen '{screen}'", param_hint="--screen")

    from datadock.cli.tui import run_app

    run_app(initial_screen=screen, log_file=log_file, verbosity=verbose)
