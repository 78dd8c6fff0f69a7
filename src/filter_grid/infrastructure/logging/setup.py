"""Logging setup."""

from pathlib import Path
from typing import Optional
import sys

from loguru import logger


# TRACE (5) carries debounce bookkeeping; keep it visually distinct
logger.level("TRACE", color="<blue>")

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    console_output: bool = True,
    json_output: bool = False
):
    """Setup application logging.

    Args:
        log_level: Logging level
        log_file: Optional log file path
        console_output: Whether to log to console
        json_output: Whether to use JSON formatting for the file sink

    Returns:
        Configured logger instance
    """
    # Remove default handler
    logger.remove()
    logger.configure(extra={"name": "filter_grid"})

    if console_output:
        logger.add(
            sys.stderr,
            level=log_level,
            format=CONSOLE_FORMAT
        )

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        if json_output:
            logger.add(
                log_file,
                level=log_level,
                format="{message}",
                serialize=True
            )
        else:
            logger.add(
                log_file,
                level=log_level,
                rotation="10 MB",
                retention="7 days"
            )

    return logger


def get_logger(name: str):
    """Get a logger instance with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logger.bind(name=name)


class LogContext:
    """Attach extra fields to every record logged inside the block.

    Example:
        with LogContext(operation="query", rows=12):
            logger.info("done")
    """

    def __init__(self, **fields):
        self._fields = fields
        self._context = None

    def __enter__(self) -> 'LogContext':
        self._context = logger.contextualize(**self._fields)
        self._context.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._context.__exit__(exc_type, exc, tb)
        self._context = None
