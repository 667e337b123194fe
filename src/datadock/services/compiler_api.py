"""HTTP client for the data compiler API."""

from __future__ import annotations

from typing import Any

import httpx

from datadock.core.logging import get_logger
from datadock.services.outcome import (
    TRANSPORT_ERRORS,
    RequestOutcome,
    classify,
    classify_response,
)
from datadock.services.schemas import CompileRequest

logger = get_logger(__name__)


class DataCompilerClient:
    """Stateless client for the data compiler API.

    Args:
        base_url: Service root, e.g. ``http://localhost:4001``
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
        return f"DataCompilerClient(base_url={self.base_url!r})"

    async def compile_json(self, document: Any) -> RequestOutcome:
        """POST /compile with ``{"json_data": document}``.

        The document is sent as parsed; its shape is the compiler's business.
        """
        body = CompileRequest(json_data=document).model_dump()
        logger.debug("compile_request", path="/compile")
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    "/compile",
                    json=body,
                    headers={"Content-Type": "application/json"},
                )
                outcome = classify_response(response)
        except TRANSPORT_ERRORS as e:
            outcome = classify(e)

        logger.debug("compile_response", outcome=outcome.describe())
        return outcome
