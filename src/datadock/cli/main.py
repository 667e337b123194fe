"""Main CLI application entry point."""

from __future__ import annotations

import typer

from datadock.cli.commands import browse, compile, data, tables

app = typer.Typer(
    name="datadock",
    help="datadock - browse a data API and compile table schemas.",
    no_args_is_help=True,
)

# Register commands
app.command()(browse.browse)
app.command()(tables.tables)
app.command()(data.data)
app.command(name="compile")(compile.compile_schema)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
