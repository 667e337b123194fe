"""Request outcome classification.

Every gateway call is reduced to a ``RequestOutcome`` so orchestrators branch
on an explicit tag instead of inspecting responses and exceptions:

- ``SUCCESS``: the service answered 2xx with a JSON body
- ``REJECTED``: the service answered, but not with 2xx
- ``TRANSPORT_FAILURE``: no usable answer (network error, timeout, garbage body)
- ``PENDING``: the request has not completed yet
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx


# Exceptions that mean "the request could not complete"
TRANSPORT_ERRORS: tuple[type[BaseException], ...] = (httpx.HTTPError, httpx.InvalidURL, OSError)


class OutcomeKind(str, Enum):
    """Tag of a request outcome."""

    PENDING = "pending"
    SUCCESS = "success"
    REJECTED = "rejected"
    TRANSPORT_FAILURE = "transport_failure"


@dataclass(frozen=True)
class RequestOutcome:
    """Classified result of one network operation."""

    kind: OutcomeKind
    payload: Any = None
    status_code: int | None = None
    server_message: str | None = None
    cause: BaseException | None = None

    @classmethod
    def pending(cls) -> RequestOutcome:
        """Create an outcome for a request still in flight."""
        return cls(kind=OutcomeKind.PENDING)

    @classmethod
    def success(cls, payload: Any, status_code: int = 200) -> RequestOutcome:
        """Create a successful outcome."""
        return cls(kind=OutcomeKind.SUCCESS, payload=payload, status_code=status_code)

    @classmethod
    def rejected(
        cls,
        status_code: int,
        server_message: str | None = None,
        payload: Any = None,
    ) -> RequestOutcome:
        """Create an outcome for a reachable service that said no."""
        return cls(
            kind=OutcomeKind.REJECTED,
            status_code=status_code,
            server_message=server_message,
            payload=payload,
        )

    @classmethod
    def transport_failure(cls, cause: BaseException) -> RequestOutcome:
        """Create an outcome for a request that could not complete."""
        return cls(kind=OutcomeKind.TRANSPORT_FAILURE, cause=cause)

    @property
    def is_success(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    @property
    def is_ok(self) -> bool:
        """True only for a success carrying exactly HTTP 200."""
        return self.kind is OutcomeKind.SUCCESS and self.status_code == 200

    def describe(self) -> str:
        """Short human-readable summary, for logs."""
        if self.kind is OutcomeKind.TRANSPORT_FAILURE:
            return f"transport failure: {self.cause!r}"
        if self.kind is OutcomeKind.PENDING:
            return "pending"
        return f"{self.kind.value} (HTTP {self.status_code})"


def _server_message(payload: Any) -> str | None:
    """Pull the service's own ``message`` text out of a JSON body."""
    if isinstance(payload, dict):
        message = payload.get("message")
        if isinstance(message, str) and message:
            return message
    return None


def classify_response(response: httpx.Response) -> RequestOutcome:
    """Classify a response that arrived.

    Non-2xx bodies are parsed leniently (only for their message); a non-empty
    2xx body that is not JSON means the exchange did not complete usefully.
    """
    payload = None
    if response.content:
        try:
            payload = response.json()
        except ValueError as e:
            if response.is_success:
                return RequestOutcome.transport_failure(e)

    if response.is_success:
        return RequestOutcome.success(payload, status_code=response.status_code)

    return RequestOutcome.rejected(
        status_code=response.status_code,
        server_message=_server_message(payload),
        payload=payload,
    )


def classify(result: httpx.Response | BaseException) -> RequestOutcome:
    """Classify either a response or the exception raised instead of one."""
    if isinstance(result, BaseException):
        return RequestOutcome.transport_failure(result)
    return classify_response(result)
