"""Tables command - list the tables offered by the data API."""

from __future__ import annotations

import asyncio
import json

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


def tables(
    tui: TuiFlag = False,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """List the database tables available from the data API.

    Examples:

        datadock tables

        datadock tables --json

        datadock tables --tui
    """
    setup_logging(verbosity=verbose)

    if tui:
        from datadock.cli.tui import run_app

        run_app(initial_screen="data", verbosity=verbose)
        return

    browser = TableBrowser(build_data_client())
    state = asyncio.run(browser.load_table_list())

    if state.error:
        console.print(f"[red]Error: {escape(state.error)}[/red]")
        raise typer.Exit(1)

    if json_output:
        typer.echo(json.dumps({"database_tables": state.tables}, indent=2))
    else:
        _tables_rich(state)


def _tables_rich(state: TableBrowserState) -> None:
    """Print the table list with Rich."""
    if state.show_no_tables:
        console.print("[yellow]No database tables available[/yellow]")
        return

    table = RichTable(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Database table")

    for index, name in enumerate(state.tables, start=1):
        table.add_row(str(index), escape(name))

    console.print(table)
