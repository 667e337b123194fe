"""Schema upload orchestrator.

Parses an uploaded table-schema file, submits it to the data compiler API and
reduces the result to a single status message.

Verdict rules when the HTTP status and the body's own ``status`` disagree:
the HTTP status decides Accepted vs Rejected; the body's ``status`` literal is
kept as ``message_type`` and the mismatch is flagged with ``verdict_conflict``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from datadock.core.logging import get_logger, log_context
from datadock.orchestration.base import ChangeListener, CompilerGateway
from datadock.services.outcome import OutcomeKind, RequestOutcome
from datadock.services.schemas import CompilerResponse, TableSchema

logger = get_logger(__name__)

PARSE_ERROR_MESSAGE = "Invalid JSON file format"
ACCEPTED_MESSAGE = "JSON compiled successfully"
REJECTED_MESSAGE = "Failed to connect to compile the JSON file. Please try again."
TRANSPORT_FAILURE_MESSAGE = "Failed to connect to the compiler service. Please try again."


class UploadStatus(str, Enum):
    """Status of the current upload attempt."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    PARSE_ERROR = "parse_error"
    TRANSPORT_FAILURE = "transport_failure"


@dataclass
class UploadState:
    """Display state of the schema uploader."""

    status: UploadStatus = UploadStatus.IDLE
    message: str | None = None

    # Literal ``status`` from the compiler's response body, when there was one
    message_type: str | None = None

    @property
    def busy(self) -> bool:
        return self.status is UploadStatus.SUBMITTING

    @property
    def is_error(self) -> bool:
        return self.status in (
            UploadStatus.REJECTED,
            UploadStatus.PARSE_ERROR,
            UploadStatus.TRANSPORT_FAILURE,
        )

    @property
    def verdict_conflict(self) -> bool:
        """HTTP status and body status tell different stories."""
        if self.message_type is None:
            return False
        if self.status is UploadStatus.ACCEPTED:
            return self.message_type != "success"
        if self.status is UploadStatus.REJECTED:
            return self.message_type != "error"
        return False

    def copy(self) -> UploadState:
        return replace(self)


class SchemaUploader:
    """Orchestrates one compile request at a time.

    Args:
        gateway: Data compiler API implementation
        on_change: Optional listener, called with a state snapshot after every
            transition
    """

    def __init__(
        self,
        gateway: CompilerGateway,
        on_change: ChangeListener[UploadState] | None = None,
    ) -> None:
        self.gateway = gateway
        self.on_change = on_change
        self.state = UploadState()

    @property
    def busy(self) -> bool:
        return self.state.busy

    def _transition(
        self,
        status: UploadStatus,
        message: str | None = None,
        message_type: str | None = None,
    ) -> UploadState:
        self.state = UploadState(status=status, message=message, message_type=message_type)
        if self.on_change is not None:
            self.on_change(self.state.copy())
        return self.state

    async def submit(self, raw_file_contents: str) -> UploadState:
        """Parse and submit a schema document.

        A call made while a previous submission is in flight is refused and
        returns the current state without issuing a request.
        """
        if self.busy:
            logger.warning("compile_refused_busy")
            return self.state

        self._transition(UploadStatus.IDLE)

        try:
            document = parse_schema_text(raw_file_contents)
        except json.JSONDecodeError as e:
            logger.info("schema_parse_failed", line=e.lineno, column=e.colno, reason=e.msg)
            return self._transition(UploadStatus.PARSE_ERROR, PARSE_ERROR_MESSAGE)
        except (ValueError, RecursionError) as e:
            logger.info("schema_parse_failed", reason=str(e))
            return self._transition(UploadStatus.PARSE_ERROR, PARSE_ERROR_MESSAGE)

        self._transition(UploadStatus.SUBMITTING, "")

        with log_context(request="compile", schema=describe_schema(document)):
            try:
                outcome = await self.gateway.compile_json(document)
            except Exception as e:
                # A broken gateway must not leave the uploader stuck in SUBMITTING
                logger.exception("compile_gateway_error")
                outcome = RequestOutcome.transport_failure(e)
            return self._apply(outcome)

    async def submit_file(self, path: Path) -> UploadState:
        """Read a file as UTF-8 text and submit it.

        An unreadable or undecodable file counts as a parse error.
        """
        if self.busy:
            logger.warning("compile_refused_busy")
            return self.state

        try:
            contents = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.info("schema_read_failed", path=str(path), reason=str(e))
            self._transition(UploadStatus.IDLE)
            return self._transition(UploadStatus.PARSE_ERROR, PARSE_ERROR_MESSAGE)

        return await self.submit(contents)

    def _apply(self, outcome: RequestOutcome) -> UploadState:
        if outcome.kind is OutcomeKind.TRANSPORT_FAILURE:
            logger.warning("compile_transport_failure", cause=repr(outcome.cause))
            return self._transition(UploadStatus.TRANSPORT_FAILURE, TRANSPORT_FAILURE_MESSAGE)

        body = _parse_body(outcome.payload)
        server_message = body.message if body and body.message else None
        message_type = body.status if body else None

        if outcome.is_ok:
            state = self._transition(
                UploadStatus.ACCEPTED,
                server_message or ACCEPTED_MESSAGE,
                message_type,
            )
            logger.info("compile_accepted", message=state.message)
        else:
            state = self._transition(
                UploadStatus.REJECTED,
                server_message or REJECTED_MESSAGE,
                message_type,
            )
            logger.info("compile_rejected", status_code=outcome.status_code, message=state.message)

        if state.verdict_conflict:
            logger.warning(
                "compile_verdict_conflict",
                status_code=outcome.status_code,
                body_status=message_type,
            )
        return state


def _parse_body(payload: Any) -> CompilerResponse | None:
    """Read the compiler's response body, tolerating anything unexpected."""
    if not isinstance(payload, dict):
        return None
    try:
        return CompilerResponse.model_validate(payload)
    except ValidationError:
        return None


def describe_schema(document: Any) -> str:
    """One-line description of a schema document, for logs and previews.

    Never fails: documents that do not look like a table schema are described
    by their JSON type.
    """
    try:
        schema = TableSchema.model_validate(document)
    except ValidationError:
        return f"unrecognised {type(document).__name__} document"
    return f"{schema.name} ({len(schema.columns)} columns)"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_schema_text(text: str) -> Any:
    """Parse strict JSON text.

    Unlike ``json.loads`` on its own, ``NaN`` and ``Infinity`` are refused,
    since no JSON encoder can send them on.

    Raises:
        ValueError: Text is not valid JSON (``json.JSONDecodeError`` included)
        RecursionError: Nesting is too deep to decode
    """
    return json.loads(text, parse_constant=_reject_constant)
