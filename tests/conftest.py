"""Shared pytest fixtures for all tests."""

import asyncio
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from datadock.core.config import get_settings
from datadock.core.logging import configure_logging
from datadock.services import RequestOutcome

Handler = Callable[[httpx.Request], httpx.Response]


class FakeDataGateway:
    """In-memory data API whose responses can be held back by the test.

    Table-list outcomes are handed out in order (the last one repeats). A
    table whose gate is held does not answer until the gate is set.
    """

    def __init__(
        self,
        table_list: list[RequestOutcome] | None = None,
        tables: dict[str, RequestOutcome] | None = None,
    ) -> None:
        self.table_list_outcomes = table_list or [
            RequestOutcome.success({"database_tables": []})
        ]
        self.table_outcomes = tables or {}
        self.list_gates: list[asyncio.Event | None] = []
        self.table_gates: dict[str, asyncio.Event] = {}
        self.requests: list[str] = []

    def hold_list(self) -> asyncio.Event:
        """Hold back the next table-list call until the returned event is set."""
        gate = asyncio.Event()
        self.list_gates.append(gate)
        return gate

    def hold_table(self, name: str) -> asyncio.Event:
        """Hold back row fetches for a table until the returned event is set."""
        gate = asyncio.Event()
        self.table_gates[name] = gate
        return gate

    async def get_table_list(self) -> RequestOutcome:
        self.requests.append("/db_tables")
        outcome = (
            self.table_list_outcomes.pop(0)
            if len(self.table_list_outcomes) > 1
            else self.table_list_outcomes[0]
        )
        gate = self.list_gates.pop(0) if self.list_gates else None
        if gate is not None:
            await gate.wait()
        return outcome

    async def get_table_data(self, name: str) -> RequestOutcome:
        self.requests.append(f"/data/{name}")
        gate = self.table_gates.get(name)
        if gate is not None:
            await gate.wait()
        return self.table_outcomes.get(name, RequestOutcome.rejected(404))


class FakeCompilerGateway:
    """In-memory data compiler API recording every submitted document."""

    def __init__(
        self,
        outcome: RequestOutcome | None = None,
        error: Exception | None = None,
    ) -> None:
        self.outcome = outcome or RequestOutcome.success(
            {"status": "success", "message": "Compiled successfully"}
        )
        self.error = error
        self.documents: list[Any] = []
        self.gate: asyncio.Event | None = None

    def hold(self) -> asyncio.Event:
        """Hold back compile calls until the returned event is set."""
        self.gate = asyncio.Event()
        return self.gate

    async def compile_json(self, document: Any) -> RequestOutcome:
        self.documents.append(document)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.outcome


def table_data(columns: list[str], rows: list[list[Any]]) -> RequestOutcome:
    """Successful row-fetch outcome."""
    return RequestOutcome.success({"columns": columns, "rows": rows})


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch):
    """Isolate tests from the developer's environment and each other's logging."""
    for name in (
        "DATADOCK_DATA_API_URL",
        "DATADOCK_DATA_COMPILER_URL",
        "DATADOCK_REQUEST_TIMEOUT",
        "DATADOCK_LOG_LEVEL",
        "DATADOCK_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    configure_logging()


@pytest.fixture
def data_gateway() -> FakeDataGateway:
    """Data API with two tables, one of them empty."""
    return FakeDataGateway(
        table_list=[RequestOutcome.success({"database_tables": ["customers", "audit_log"]})],
        tables={
            "customers": table_data(
                ["id", "name", "email"],
                [[1, "Alice", "alice@example.com"], [2, "Bob", None]],
            ),
            "audit_log": table_data(["id", "event"], []),
        },
    )


@pytest.fixture
def compiler_gateway() -> FakeCompilerGateway:
    """Data compiler API that accepts everything."""
    return FakeCompilerGateway()


@pytest.fixture
def mock_transport() -> Callable[[Handler], httpx.MockTransport]:
    """Factory for transports that answer requests with a handler function."""

    def _make(handler: Handler) -> httpx.MockTransport:
        return httpx.MockTransport(handler)

    return _make


@pytest.fixture
def schema_document() -> dict[str, Any]:
    """A well-formed table schema document."""
    return {
        "name": "customers",
        "description": "Customer master data",
        "columns": [
            {"name": "id", "type": "integer", "nullable": False},
            {"name": "name", "type": "varchar", "length": 100},
            {"name": "email", "type": "varchar", "length": 255, "nullable": True},
        ],
    }


@pytest.fixture
def make_data_gateway() -> type[FakeDataGateway]:
    """Build a data API fake with custom outcomes."""
    return FakeDataGateway


@pytest.fixture
def make_compiler_gateway() -> type[FakeCompilerGateway]:
    """Build a data compiler API fake with a custom outcome."""
    return FakeCompilerGateway
