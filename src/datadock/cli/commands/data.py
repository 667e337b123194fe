"""Data command - show the rows of one table."""

from __future__ import annotations

import asyncio
import json
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table as RichTable

from datadock.cli.common import (
    JsonFlag,
    TuiFlag,
    VerboseOption,
    build_data_client,
    console,
    setup_logging,
)
from datadock.orchestration import TableBrowser, TableBrowserState


def data(
    table_name: Annotated[
        str,
        typer.Argument(help="Name of the table to fetch"),
    ],
    tui: TuiFlag = False,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Fetch and print the columns and rows of a table.

    Examples:

        datadock data customers

        datadock data customers --json
    """
    setup_logging(verbosity=verbose)

    if tui:
        from datadock.cli.tui import run_app

        run_app(initial_screen="data", table=table_name, verbosity=verbose)
        return

    browser = TableBrowser(build_data_client())
    state = asyncio.run(browser.select_table(table_name))

    if state.error:
        console.print(f"[red]Error: {escape(state.error)}[/red]")
        raise typer.Exit(1)

    if json_output:
        typer.echo(json.dumps({"columns": state.columns, "rows": state.rows}, indent=2))
    else:
        _data_rich(state)


def _data_rich(state: TableBrowserState) -> None:
    """Print table rows with Rich."""
    if state.show_no_data:
        console.print(f"[yellow]No data available[/yellow] for {escape(state.selected or '')}")
        return

    table = RichTable(title=escape(state.selected or ""), show_header=True, header_style="bold")
    for column in state.columns:
        table.add_column(escape(column))

    for row in state.rows:
        table.add_row(*["" if cell is None else escape(str(cell)) for cell in row])

    console.print(table)
