"""Main Textual application for the datadock TUI."""

from __future__ import annotations

from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from datadock.orchestration import CompilerGateway, DataGateway


class DatadockApp(App[None]):
    """datadock interactive TUI application.

    Provides screens for:
    - Data API: browse tables and their rows
    - Data Compiler: upload a JSON table schema for compilation
    """

    CSS_PATH = "styles.tcss"
    TITLE = "datadock"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("d", "switch_screen('data')", "Data API", show=True),
        Binding("c", "switch_screen('compiler')", "Data Compiler", show=True),
        Binding("?", "show_help", "Help", show=True),
    ]

    def __init__(
        self,
        data_gateway: DataGateway,
        compiler_gateway: CompilerGateway,
        initial_screen: str = "data",
        table: str | None = None,
        schema_file: Path | None = None,
    ) -> None:
        """Initialize the app.

        Args:
            data_gateway: Client for the data API
            compiler_gateway: Client for the data compiler API
            initial_screen: Screen to show on startup ("data" or "compiler")
            table: Optional table to select once the table list has loaded
            schema_file: Optional schema file to upload on startup
        """
        super().__init__()
        self.data_gateway = data_gateway
        self.compiler_gateway = compiler_gateway
        self.initial_screen = initial_screen
        self.initial_table = table
        self.schema_file = schema_file

    def compose(self) -> ComposeResult:
        """Create child widgets for the app."""
        yield Header()
        yield Footer()

    def on_mount(self) -> None:
        """Handle app mount - install screens and switch to initial."""
        from datadock.cli.tui.screens import DataApiScreen, DataCompilerScreen

        self.install_screen(
            DataApiScreen(self.data_gateway, initial_table=self.initial_table),
            name="data",
        )
        self.install_screen(
            DataCompilerScreen(self.compiler_gateway, initial_path=self.schema_file),
            name="compiler",
        )

        self.push_screen(self.initial_screen)

    async def action_switch_screen(self, screen_name: str) -> None:
        """Switch to a different screen.

        Installed screens keep their state, so switching away and back does
        not reload anything.
        """
        if self.screen is self.get_screen(screen_name):
            return
        if len(self.screen_stack) > 1:
            self.pop_screen()
        self.push_screen(screen_name)

    def action_show_help(self) -> None:
        """Show help dialog."""
        self.notify(
            "Keys: d = Data API, c = Data Compiler, r = reload tables, q = quit\n"
            "Use arrow keys to move, Enter to select a table",
            title="Help",
            timeout=5,
        )
