"""Core infrastructure: configuration and logging."""

from datadock.core.config import Settings, get_settings
from datadock.core.logging import configure_logging, get_logger, log_context

__all__ = [
    "Settings",
    "configure_logging",
    "get_logger",
    "get_settings",
    "log_context",
]
