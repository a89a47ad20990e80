"""Logging setup built on loguru.

Every module obtains its logger with ``get_logger(__name__)``; the sinks
are configured once at application startup by ``setup_logging``.
"""

import sys
from pathlib import Path

from loguru import logger as _logger

DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[logger_name]}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """Configure loguru sinks.

    Args:
        level: Minimum log level for all sinks
        log_file: Optional path of a rotating log file
        rotation: When to rotate the log file
        retention: How long rotated files are kept
    """
    _logger.remove()
    _logger.configure(extra={"logger_name": "root"})
    _logger.add(sys.stderr, level=level, format=DEFAULT_FORMAT, backtrace=False)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        _logger.add(
            log_file,
            level=level,
            format=DEFAULT_FORMAT,
            rotation=rotation,
            retention=retention,
            encoding="utf-8",
            enqueue=True,
        )


def get_logger(name: str | None = None):
    """Get a logger bound to a module name.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        loguru logger with ``logger_name`` bound
    """
    return _logger.bind(logger_name=name or "root")
