"""Logging infrastructure."""

from filter_grid.infrastructure.logging.setup import (
    LogContext,
    get_logger,
    setup_logging,
)

__all__ = [
    "LogContext",
    "get_logger",
    "setup_logging",
]
