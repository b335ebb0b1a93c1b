"""Logging configuration for the command line.

Library modules only create loggers; handlers are installed here, once,
by the CLI entry point.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_PACKAGE_LOGGER = "binventory"


def level_number(level: str) -> int:
    """Return the numeric value of a level name such as ``"debug"``.

    Raises
    ------
    ValueError
        If ``level`` is not a standard logging level name.
    """
    levels = logging.getLevelNamesMapping()
    try:
        return levels[level.strip().upper()]
    except KeyError:
        choices = ", ".join(name for name in levels if name != "NOTSET")
        raise ValueError(f"Unknown log level {level!r} (choose from {choices})") from None


def configure_logging(level: str = "WARNING", console: Console | None = None) -> None:
    """Route ``binventory`` log records to stderr through Rich.

    Raises
    ------
    ValueError
        If ``level`` is not a standard logging level name.
    """
    number = level_number(level)
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger(_PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(number)
