"""Table browser orchestrator.

Loads the list of tables from the data API and, on selection, the rows of one
table. Holds two independent loading flags and a single error slot.

Requests are never cancelled. Each one is tagged with a generation number when
it starts, and a completion whose generation is no longer current is dropped,
so the last user action wins no matter which response arrives first.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from pydantic import ValidationError

from datadock.core.logging import get_logger, log_context
from datadock.orchestration.base import ChangeListener, DataGateway
from datadock.services.outcome import OutcomeKind, RequestOutcome
from datadock.services.schemas import DatabaseTableDataResponse, DatabaseTableListResponse

logger = get_logger(__name__)

TABLE_LIST_ERROR = "Failed to retrieve database table list"
TABLE_DATA_ERROR = "Failed to retrieve data"


@dataclass
class TableBrowserState:
    """Display state of the table browser."""

    list_loading: bool = False
    data_loading: bool = False
    tables: list[str] = field(default_factory=list)
    selected: str | None = None
    columns: list[str] = field(default_factory=list)
    rows: list[list[Any]] = field(default_factory=list)
    error: str | None = None

    # Whether the current list load / row fetch has completed
    list_loaded: bool = False
    data_loaded: bool = False

    @property
    def show_no_tables(self) -> bool:
        """List load finished, nothing came back, and nothing went wrong."""
        return self.list_loaded and not self.list_loading and not self.tables and not self.error

    @property
    def show_no_data(self) -> bool:
        """A selection's fetch finished with no rows and no error."""
        return (
            self.selected is not None
            and self.data_loaded
            and not self.data_loading
            and not self.rows
            and not self.error
        )

    @property
    def show_data(self) -> bool:
        return self.selected is not None and not self.data_loading and bool(self.rows)

    def copy(self) -> TableBrowserState:
        """Snapshot with independent lists."""
        return replace(
            self,
            tables=list(self.tables),
            columns=list(self.columns),
            rows=[list(row) for row in self.rows],
        )


class TableBrowser:
    """Orchestrates table-list and table-data requests.

    Args:
        gateway: Data API implementation
        on_change: Optional listener, called with a state snapshot after every
            transition
    """

    def __init__(
        self,
        gateway: DataGateway,
        on_change: ChangeListener[TableBrowserState] | None = None,
    ) -> None:
        self.gateway = gateway
        self.on_change = on_change
        self.state = TableBrowserState()
        self._list_generation = 0
        self._data_generation = 0

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.state.copy())

    async def load_table_list(self) -> TableBrowserState:
        """Fetch the table list, replacing everything currently shown.

        Also supersedes any row fetch still in flight, since the selection it
        was issued for is cleared here.
        """
        self._list_generation += 1
        self._data_generation += 1
        generation = self._list_generation

        self.state = TableBrowserState(list_loading=True)
        self._notify()

        with log_context(request="table_list", generation=generation):
            outcome = await self.gateway.get_table_list()

            if generation != self._list_generation:
                logger.debug("table_list_discarded", outcome=outcome.describe())
                return self.state

            tables = _parse_table_list(outcome)
            if tables is None:
                self.state.error = TABLE_LIST_ERROR
                logger.warning("table_list_failed", outcome=outcome.describe())
            else:
                self.state.tables = tables
                logger.info("table_list_loaded", count=len(tables))

            self.state.list_loading = False
            self.state.list_loaded = True
            self._notify()
            return self.state

    async def select_table(self, name: str) -> TableBrowserState:
        """Select a table and fetch its rows.

        The name is not checked against the loaded listing.
        """
        self._data_generation += 1
        generation = self._data_generation

        self.state.data_loading = True
        self.state.data_loaded = False
        self.state.selected = name
        self.state.error = None
        self.state.columns = []
        self.state.rows = []
        self._notify()

        with log_context(request="table_data", generation=generation, table=name):
            outcome = await self.gateway.get_table_data(name)

            if generation != self._data_generation:
                logger.debug("table_data_discarded", outcome=outcome.describe())
                return self.state

            data = _parse_table_data(outcome)
            if data is None:
                self.state.error = TABLE_DATA_ERROR
                logger.warning("table_data_failed", outcome=outcome.describe())
            else:
                self.state.columns = data.columns
                self.state.rows = data.rows
                logger.info("table_data_loaded", columns=len(data.columns), rows=len(data.rows))

            self.state.data_loading = False
            self.state.data_loaded = True
            self._notify()
            return self.state


def _parse_table_list(outcome: RequestOutcome) -> list[str] | None:
    """Table names from a 200 outcome, or None for anything else."""
    if not outcome.is_ok:
        if outcome.kind is OutcomeKind.TRANSPORT_FAILURE:
            logger.debug("table_list_transport_failure", cause=repr(outcome.cause))
        return None
    try:
        return DatabaseTableListResponse.model_validate(outcome.payload).database_tables
    except ValidationError as e:
        logger.warning("table_list_malformed", errors=e.error_count())
        return None


def _parse_table_data(outcome: RequestOutcome) -> DatabaseTableDataResponse | None:
    """Columns and rows from a 200 outcome, or None for anything else."""
    if not outcome.is_ok:
        if outcome.kind is OutcomeKind.TRANSPORT_FAILURE:
            logger.debug("table_data_transport_failure", cause=repr(outcome.cause))
        return None
    try:
        return DatabaseTableDataResponse.model_validate(outcome.payload)
    except ValidationError as e:
        logger.warning("table_data_malformed", errors=e.error_count())
        return None
