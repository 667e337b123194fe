"""HTTP client for the data API (table listing and table rows)."""

from __future__ import annotations

from urllib.parse import quote

import httpx

from datadock.core.logging import get_logger
from datadock.services.outcome import (
    TRANSPORT_ERRORS,
    RequestOutcome,
    classify,
    classify_response,
)

logger = get_logger(__name__)

_HEADERS = {"Accept": "application/json"}


class DataApiClient:
    """Stateless client for the data API.

    Each call opens its own ``httpx.AsyncClient`` and returns a classified
    ``RequestOutcome``; exceptions never escape.

    Args:
        base_url: Service root, e.g. ``http://localhost:4000``
        timeout: Per-request timeout in seconds (None waits indefinitely)
        transport: Optional httpx transport (tests inject a mock here)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def __repr__(self) -> str:
        return f"DataApiClient(base_url={self.base_url!r})"

    async def get_table_list(self) -> RequestOutcome:
        """GET /db_tables."""
        return await self._get("/db_tables")

    async def get_table_data(self, table_name: str) -> RequestOutcome:
        """GET /data/{table_name}, with the name encoded as one path segment."""
        return await self._get(f"/data/{quote(table_name, safe='')}")

    async def _get(self, path: str) -> RequestOutcome:
        logger.debug("data_api_request", method="GET", path=path)
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(path, headers=_HEADERS)
                outcome = classify_response(response)
        except TRANSPORT_ERRORS as e:
            outcome = classify(e)

        logger.debug("data_api_response", path=path, outcome=outcome.describe())
        return outcome
