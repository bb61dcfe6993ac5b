"""Logging setup for applications using tempurl.

The library itself only emits records through standard-library loggers
named after its modules ("tempurl.core.services", ...). Applications that
want console output can call configure_logging().
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.logging import RichHandler


if TYPE_CHECKING:
    from rich.console import Console


def configure_logging(
    level: int | str = logging.INFO,
    console: Console | None = None,
) -> logging.Logger:
    """Attach a Rich console handler to the package logger.

    Calling this again replaces the previously installed handler.

    Args:
        level: Log level for the package logger.
        console: Optional Rich console to write to.

    Returns:
        The configured "tempurl" logger.
    """
    logger = logging.getLogger("tempurl")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
