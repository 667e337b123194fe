"""Compile command - submit a table-schema file to the data compiler API."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from datadock.cli.common import (
    TuiFlag,
    VerboseOption,
    build_compiler_client,
    console,
    setup_logging,
)
from datadock.orchestration import SchemaUploader, UploadStatus


def compile_schema(
    schema_file: Annotated[
        Path,
        typer.Argument(
            help="JSON table-schema file to compile",
            dir_okay=False,
        ),
    ],
    tui: TuiFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Upload a JSON table schema and report the compiler's verdict.

    Exits 0 when the schema is accepted, 1 otherwise.

    Examples:

        datadock compile ./customers.json

        datadock compile ./customers.json -v
    """
    setup_logging(verbosity=verbose)

    if tui:
        from datadock.cli.tui import run_app

        run_app(initial_screen="compiler", schema_file=schema_file, verbosity=verbose)
        return

    uploader = SchemaUploader(build_compiler_client())
    state = asyncio.run(uploader.submit_file(schema_file))

    message = escape(state.message or "")

    if state.status is UploadStatus.ACCEPTED:
        console.print(f"[green]{message}[/green]")
        if state.verdict_conflict:
            body_status = escape(state.message_type or "")
            console.print(
                f"[yellow]Compiler response body reported status '{body_status}'[/yellow]"
            )
        return

    console.print(f"[red]{message}[/red]")
    raise typer.Exit(1)
