"""CLI for datadock.

Provides commands for browsing the data API and compiling table schemas.

Usage:
    datadock browse
    datadock tables --json
    datadock data customers
    datadock compile ./customers.json

Environment:
    Loads .env file from current directory if present.
    Set DATADOCK_DATA_API_URL and DATADOCK_DATA_COMPILER_URL to point at the services.
"""

from datadock.cli.main import app, main

__all__ = ["app", "main"]
