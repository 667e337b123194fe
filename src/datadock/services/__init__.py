"""Gateways to the remote data API and data compiler API."""

from datadock.services.compiler_api import DataCompilerClient
from datadock.services.data_api import DataApiClient
from datadock.services.outcome import OutcomeKind, RequestOutcome, classify, classify_response

__all__ = [
    "DataApiClient",
    "DataCompilerClient",
    "OutcomeKind",
    "RequestOutcome",
    "classify",
    "classify_response",
]
