"""Logging helpers for consistent console output."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "INFO", rich_tracebacks: bool = True) -> logging.Logger:
    """Configure the root logger with a rich handler and return the ``fnkit`` logger.

    The ``fnkit`` logger level is always set, so ``DEBUG`` takes effect even
    when the root logger was configured elsewhere.
    """

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    handler = RichHandler(console=Console(stderr=True), rich_tracebacks=rich_tracebacks, show_path=False)
    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
    )
    package_logger = logging.getLogger("fnkit")
    package_logger.setLevel(numeric_level)
    return package_logger


__all__ = ["setup_logging"]
