"""Orchestrator base types and protocols.

Defines the gateway protocols the orchestrators depend on, so views and tests
can inject any implementation (the httpx clients, or fakes).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeVar

from datadock.services.outcome import RequestOutcome

StateT = TypeVar("StateT")

# Called with the new state after every transition
ChangeListener = Callable[[StateT], None]


class DataGateway(Protocol):
    """What the table browser needs from the data API."""

    async def get_table_list(self) -> RequestOutcome:
        """Fetch the list of table names."""
        ...

    async def get_table_data(self, table_name: str) -> RequestOutcome:
        """Fetch the columns and rows of one table."""
        ...


class CompilerGateway(Protocol):
    """What the schema uploader needs from the data compiler API."""

    async def compile_json(self, document: Any) -> RequestOutcome:
        """Submit a parsed schema document for compilation."""
        ...
