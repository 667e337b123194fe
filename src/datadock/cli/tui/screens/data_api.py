"""Data API screen - table list and row viewer."""

from __future__ import annotations

from typing import Any

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container, Vertical
from textual.screen import Screen
from textual.widgets import DataTable, Static

from datadock.orchestration import DataGateway, TableBrowser, TableBrowserState

SELECTED_MARKER = "● "
UNSELECTED_MARKER = "  "


class DataApiScreen(Screen[None]):
    """Lists the data API's tables and shows the rows of the selected one."""

    BINDINGS = [
        ("r", "reload", "Reload tables"),
    ]

    def __init__(
        self,
        gateway: DataGateway,
        initial_table: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.browser = TableBrowser(gateway, on_change=self._render_state)
        self.initial_table = initial_table
        self._table_names: list[str] = []
        self._rendered_list: tuple[tuple[str, ...], str | None] | None = None

    def compose(self) -> ComposeResult:
        """Create the screen layout."""
        with Container(classes="screen-container"):
            yield Static("Data API", classes="screen-title")
            yield Static("", id="error-banner")
            with Vertical(classes="tables-section"):
                yield Static("Database tables:", classes="section-title")
                yield Static("", id="table-list-status", classes="info-message")
                yield DataTable(id="table-list")
            with Vertical(classes="data-section"):
                yield Static("", id="data-status", classes="info-message")
                yield DataTable(id="data-table")

    def on_mount(self) -> None:
        """Set up tables and start loading the table list."""
        table_list = self.query_one("#table-list", DataTable)
        table_list.cursor_type = "row"
        table_list.add_column("Table", key="table")

        data_table = self.query_one("#data-table", DataTable)
        data_table.zebra_stripes = True

        self._render_state(self.browser.state)
        self.run_worker(self._load_tables(), group="table-list")

    async def _load_tables(self) -> None:
        state = await self.browser.load_table_list()

        # A table requested on the command line is selected once, after the first load
        if self.initial_table is not None and not state.error:
            table_name, self.initial_table = self.initial_table, None
            await self.browser.select_table(table_name)

    def action_reload(self) -> None:
        """Reload the table list."""
        self.run_worker(self.browser.load_table_list(), group="table-list")

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Handle table selection - fetch its rows."""
        if event.data_table.id != "table-list":
            return
        if event.cursor_row < len(self._table_names):
            table_name = self._table_names[event.cursor_row]
            self.run_worker(self.browser.select_table(table_name), group="table-data")

    def _render_state(self, state: TableBrowserState) -> None:
        """Bring every widget in line with the browser state."""
        banner = self.query_one("#error-banner", Static)
        banner.update(Text(f"Error: {state.error}") if state.error else "")
        banner.display = state.error is not None

        self._update_table_list(state)
        self._update_data_table(state)

    def _update_table_list(self, state: TableBrowserState) -> None:
        status = self.query_one("#table-list-status", Static)
        table_list = self.query_one("#table-list", DataTable)

        if state.list_loading:
            status.update("Retrieving database table list...")
        elif state.show_no_tables:
            status.update("No database tables available")
        status.display = state.list_loading or state.show_no_tables
        table_list.display = not state.list_loading and bool(state.tables)

        rendered = (tuple(state.tables), state.selected)
        if rendered == self._rendered_list:
            return
        self._rendered_list = rendered

        table_list.clear()
        self._table_names = list(state.tables)
        for name in state.tables:
            marker = SELECTED_MARKER if name == state.selected else UNSELECTED_MARKER
            style = "bold" if name == state.selected else ""
            table_list.add_row(Text(marker + name, style=style))

        if state.selected in self._table_names:
            table_list.move_cursor(row=self._table_names.index(state.selected))

    def _update_data_table(self, state: TableBrowserState) -> None:
        status = self.query_one("#data-status", Static)
        data_table = self.query_one("#data-table", DataTable)

        if state.data_loading:
            status.update("Retrieving data...")
        elif state.show_no_data:
            status.update("No data available")
        status.display = state.data_loading or state.show_no_data
        data_table.display = state.show_data

        data_table.clear(columns=True)
        if not state.show_data:
            return

        for column in state.columns:
            data_table.add_column(Text(column))
        for row in state.rows:
            data_table.add_row(*[Text("" if cell is None else str(cell)) for cell in row])
