"""TUI screens for datadock."""

from datadock.cli.tui.screens.data_api import DataApiScreen
from datadock.cli.tui.screens.data_compiler import DataCompilerScreen

__all__ = [
    "DataApiScreen",
    "DataCompilerScreen",
]
