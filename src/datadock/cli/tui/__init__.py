"""Textual TUI for the datadock CLI.

Provides interactive terminal screens for browsing the data API and for
uploading table schemas to the data compiler API.
"""

from __future__ import annotations

from pathlib import Path

from datadock.core.config import Settings, get_settings
from datadock.core.logging import configure_logging


def run_app(
    initial_screen: str = "data",
    table: str | None = None,
    schema_file: Path | None = None,
    log_file: Path | None = None,
    verbosity: int = 0,
    settings: Settings | None = None,
) -> None:
    """Launch the Textual TUI application.

    Args:
        initial_screen: Screen to show on startup (data, compiler)
        table: Optional table to select once the table list has loaded
        schema_file: Optional schema file to upload on startup
        log_file: Optional file that receives logs while the TUI runs
        verbosity: 0=configured level, 1=INFO, 2+=DEBUG (only with log_file)
        settings: Settings for service URLs and logging (default: environment)
    """
    from datadock.cli.common import build_compiler_client, build_data_client, setup_logging
    from datadock.cli.tui.app import DatadockApp

    settings = settings or get_settings()

    app = DatadockApp(
        data_gateway=build_data_client(settings),
        compiler_gateway=build_compiler_client(settings),
        initial_screen=initial_screen,
        table=table,
        schema_file=schema_file,
    )

    if log_file is None:
        # Log lines on the terminal would tear through the TUI
        configure_logging(log_level="CRITICAL")
        app.run()
        return

    with log_file.open("a", encoding="utf-8") as stream:
        setup_logging(verbosity=verbosity, settings=settings, stream=stream)
        app.run()


__all__ = ["run_app"]
