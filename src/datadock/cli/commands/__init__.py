"""CLI command implementations."""

from datadock.cli.commands import browse, compile, data, tables

__all__ = [
    "browse",
    "compile",
    "data",
    "tables",
]
