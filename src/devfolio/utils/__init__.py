"""Shared utilities.

- logger_utils: loguru based logging setup
"""

from .logger_utils import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
