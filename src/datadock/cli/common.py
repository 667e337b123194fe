"""Shared CLI utilities and constants."""

from __future__ import annotations

from typing import Annotated, TextIO

import typer
from dotenv import load_dotenv
from rich.console import Console

from datadock.core.config import Settings, get_settings
from datadock.core.logging import configure_logging
from datadock.services import DataApiClient, DataCompilerClient

# Load .env file from current directory (for service URLs)
load_dotenv()

# Shared console instance
console = Console()

# Common type aliases for typer options
TuiFlag = Annotated[
    bool,
    typer.Option(
        "--tui",
        help="Launch interactive TUI instead of printing results",
    ),
]

JsonFlag = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Output as JSON for scripting",
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-v=INFO, -vv=DEBUG)",
    ),
]


def setup_logging(
    verbosity: int = 0,
    settings: Settings | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure structured logging based on verbosity level.

    Args:
        verbosity: 0=configured level (WARNING by default), 1=INFO, 2+=DEBUG
        settings: Settings supplying the default level and format
        stream: Log destination (default: stderr); colors are only used on stderr
    """
    settings = settings or get_settings()

    if verbosity >= 2:
        level = "DEBUG"
    elif verbosity >= 1:
        level = "INFO"
    else:
        level = settings.log_level

    configure_logging(
        log_level=level,
        log_format=settings.log_format,
        show_timestamps=verbosity >= 1,
        color=settings.log_format == "console" and stream is None,
        stream=stream,
    )


def build_data_client(settings: Settings | None = None) -> DataApiClient:
    """Create a data API client from settings."""
    settings = settings or get_settings()
    return DataApiClient(settings.data_api_url, timeout=settings.request_timeout)


def build_compiler_client(settings: Settings | None = None) -> DataCompilerClient:
    """Create a data compiler API client from settings."""
    settings = settings or get_settings()
    return DataCompilerClient(settings.data_compiler_url, timeout=settings.request_timeout)
